from .text import render_banner, render_text

__all__ = ["render_banner", "render_text"]
