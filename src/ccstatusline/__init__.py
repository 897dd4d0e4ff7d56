"""ccstatusline - multi-line status line renderer for Claude Code."""

__version__ = "0.4.0"
