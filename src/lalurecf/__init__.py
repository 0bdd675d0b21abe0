"""lalurecf: ECF bookkeeping with Período Contábil locking."""

__version__ = "0.1.0"


def __getattr__(name):
    if name == "main":
        from lalurecf.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
