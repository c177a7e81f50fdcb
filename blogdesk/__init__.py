"""Blog post generation from uploaded files, Markdown rendering and desktop window state."""

__version__ = "0.1.0"
__all__ = ["models", "resize", "upload", "rendering", "desktop"]