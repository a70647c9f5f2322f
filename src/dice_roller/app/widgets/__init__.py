from .dice_view import DiceView

__all__ = ["DiceView"]
