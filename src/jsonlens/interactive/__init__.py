from .controller import OutlineController, ViewState
from .rendered import RenderedNode, RenderedOutline

__all__ = ["OutlineController", "ViewState", "RenderedNode", "RenderedOutline"]
