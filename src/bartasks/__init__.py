"""BarTasks: "Now" / "Later" task lists with a console status shell."""

__version__ = "0.1.0"
