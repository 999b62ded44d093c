from .canvas import Canvas
from .config import DisplayConfig
from .errors import CanvasError, InvalidDimensions, OutOfRange
from .display import render_text, show
