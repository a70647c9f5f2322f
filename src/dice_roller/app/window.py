from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from PySide6 import QtCore, QtGui, QtWidgets

from ..core.io import deserialize_roller_definition, serialize_roller_definition
from ..core.roller_definition import RollerDefinition, controller_from_definition
from ..core.variants import VariantUIDefaults, load_builtin_variants, variant_registry
from .assets import RollSound, load_face_images
from .widgets import DiceView

_LOG = logging.getLogger(__name__)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, definition: RollerDefinition | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Dice Roller")
        self.resize(420, 520)

        load_builtin_variants()

        self._definition = definition or RollerDefinition()
        self._view: DiceView | None = None

        central = QtWidgets.QWidget()
        self._layout = QtWidgets.QVBoxLayout(central)
        self._layout.setAlignment(QtCore.Qt.AlignCenter)
        self._view_slot = QtWidgets.QVBoxLayout()
        self._layout.addLayout(self._view_slot)

        self._roll_button = QtWidgets.QPushButton("Roll Dice")
        self._roll_button.clicked.connect(self._roll)
        self._layout.addWidget(self._roll_button, alignment=QtCore.Qt.AlignCenter)

        self._sides_spin = QtWidgets.QSpinBox()
        self._sides_spin.setRange(1, 100)
        self._sides_spin.setPrefix("Sides: ")
        self._sides_spin.editingFinished.connect(self._on_sides_changed)
        self._layout.addWidget(self._sides_spin, alignment=QtCore.Qt.AlignCenter)

        self._value_label = QtWidgets.QLabel()
        self._value_label.setAlignment(QtCore.Qt.AlignCenter)
        self._layout.addWidget(self._value_label)
        self.setCentralWidget(central)

        self._roll_action = QtGui.QAction("Roll", self)
        self._roll_action.setShortcut(QtGui.QKeySequence("Space"))
        self._roll_action.triggered.connect(self._roll)

        self._save_action = QtGui.QAction("Save Roller", self)
        self._save_action.triggered.connect(self._save_definition)

        self._load_action = QtGui.QAction("Load Roller", self)
        self._load_action.triggered.connect(self._load_definition)

        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("File")
        self._variant_menu = file_menu.addMenu("Die")
        self._variant_group = QtGui.QActionGroup(self)
        self._variant_group.setExclusive(True)
        self._variant_actions: dict[str, QtGui.QAction] = {}
        for variant in variant_registry.all():
            action = QtGui.QAction(variant.name, self)
            action.setCheckable(True)
            action.setData(variant.variant_id)
            action.triggered.connect(self._on_variant_action)
            self._variant_group.addAction(action)
            self._variant_menu.addAction(action)
            self._variant_actions[variant.variant_id] = action
        file_menu.addSeparator()
        file_menu.addAction(self._save_action)
        file_menu.addAction(self._load_action)

        edit_menu = menu_bar.addMenu("Edit")
        edit_menu.addAction(self._roll_action)

        self._apply_definition(self._definition)

    def _apply_definition(self, definition: RollerDefinition) -> None:
        controller = controller_from_definition(definition)
        images = None
        if definition.use_custom_faces and definition.face_image_dir:
            images = load_face_images(Path(definition.face_image_dir))
        sound = None
        if definition.play_sound and definition.sound_path:
            sound = RollSound(Path(definition.sound_path), self)

        view = DiceView(controller, size=definition.size, face_images=images, sound=sound)
        view.roll_completed.connect(self._on_roll_completed)
        view.value_changed.connect(self._show_value)
        if self._view is not None:
            self._view_slot.removeWidget(self._view)
            self._view.deleteLater()
        self._view_slot.addWidget(view, alignment=QtCore.Qt.AlignCenter)
        self._view = view
        self._definition = definition

        is_flat = definition.variant == "flat"
        self._sides_spin.setVisible(is_flat)
        self._sides_spin.setValue(int(definition.sides))
        action = self._variant_actions.get(definition.variant)
        if action is not None:
            action.setChecked(True)
        self._show_value(view.shown_value)

    def _roll(self) -> None:
        if self._view is None:
            return
        if not self._view.roll():
            _LOG.debug("Roll ignored; die is still rolling")

    def _on_roll_completed(self, value: int) -> None:
        self.statusBar().showMessage(f"Rolled {value}", 2000)

    def _show_value(self, value: int) -> None:
        self._value_label.setText(f"Current value: {value}")

    def _on_variant_action(self) -> None:
        action = self.sender()
        if not isinstance(action, QtGui.QAction):
            return
        variant_id = action.data()
        if variant_id is None or variant_id == self._definition.variant:
            return
        defaults = variant_registry.get(str(variant_id)).ui_defaults() or VariantUIDefaults()
        self._apply_definition(
            replace(self._definition, variant=str(variant_id), sides=defaults.sides, size=defaults.size)
        )

    def _on_sides_changed(self) -> None:
        sides = int(self._sides_spin.value())
        if self._definition.variant != "flat" or sides == self._definition.sides:
            return
        if self._view is not None and self._view.controller.is_rolling:
            self._sides_spin.setValue(int(self._definition.sides))
            return
        self._apply_definition(replace(self._definition, sides=sides))

    def _save_definition(self) -> None:
        file_path, _ = QtWidgets.QFileDialog.getSaveFileName(
            self,
            "Save Roller",
            "roller.json",
            "Roller Files (*.json)",
        )
        if not file_path:
            return
        payload = serialize_roller_definition(self._definition)
        try:
            Path(file_path).write_text(payload, encoding="utf-8")
        except OSError as exc:
            QtWidgets.QMessageBox.information(self, "Save Roller", f"Unable to save roller: {exc}")

    def _load_definition(self) -> None:
        file_path, _ = QtWidgets.QFileDialog.getOpenFileName(
            self,
            "Load Roller",
            "",
            "Roller Files (*.json)",
        )
        if not file_path:
            return
        try:
            payload = Path(file_path).read_text(encoding="utf-8")
            definition = deserialize_roller_definition(payload)
        except (OSError, ValueError) as exc:
            QtWidgets.QMessageBox.information(self, "Load Roller", f"Unable to load roller: {exc}")
            return
        self._apply_definition(definition)
