"""Report rendering module."""
from .generator import ReportGenerator, generate_report, render_json

__all__ = ["ReportGenerator", "generate_report", "render_json"]
