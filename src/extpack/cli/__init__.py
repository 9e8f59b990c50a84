"""CLI tools for extpack"""
__all__ = ["app"]


def __getattr__(name):
    if name == "app":
        from extpack.cli.main import app
        return app
    raise AttributeError(f"module {__name__} has no attribute {name}")
