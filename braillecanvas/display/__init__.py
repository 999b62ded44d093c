from .console import render_text, show
