"""Infrastructure layer package."""

from .data_source import fetch_marketing_data
from .report_exporter import save_output_workbook, save_summary_html, save_summary_json

__all__ = ["fetch_marketing_data", "save_output_workbook", "save_summary_json", "save_summary_html"]
