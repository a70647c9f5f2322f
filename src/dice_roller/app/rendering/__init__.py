from .face_painter import FacePainter

__all__ = ["FacePainter"]
