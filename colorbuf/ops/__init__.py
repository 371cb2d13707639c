from .compose import blend_onto, copy_into, fill
from .subregion import SubRegionView

__all__ = ["blend_onto", "copy_into", "fill", "SubRegionView"]
