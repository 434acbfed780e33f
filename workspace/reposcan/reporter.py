"""
Report generation for RepoScanner
"""
import json
from datetime import datetime
from typing import Dict, List

from colorama import Fore, Style
from jinja2 import Template

from .config import Config
from .models import RepoStatus, ScanResult

STATUS_COLORS = {
    RepoStatus.SYNCED: Fore.GREEN,
    RepoStatus.NOT_SYNCED: Fore.YELLOW,
    RepoStatus.NO_REMOTE: Fore.YELLOW,
    RepoStatus.NO_COMMITS: Fore.YELLOW,
    RepoStatus.NO_REPO: Fore.YELLOW,
    RepoStatus.ERROR: Fore.RED,
}
PATH_COLOR = Fore.BLUE

MARKDOWN_TEMPLATE = """# Repository Scan Report

**Generated:** {{ timestamp }}
**Scan Path:** `{{ scan_path }}`

## Summary

{% for label, count in summary.items() -%}
- **{{ label }}:** {{ count }}
{% endfor %}
## Results

{% if results -%}
| Path | Status |
|------|--------|
{% for result in results -%}
| `{{ result.path }}` | {{ result.status.value }} |
{% endfor %}
{%- else -%}
No directories were classified.
{% endif %}"""


def summarize(results: List[ScanResult]) -> Dict[str, int]:
    """Count results per status label, in enumeration order"""
    return {status.value: sum(1 for r in results if r.status is status) for status in RepoStatus}


class ReportGenerator:
    """Renders scan results in the configured format"""

    def __init__(self, config: Config):
        self.config = config

    def generate_report(self, results: List[ScanResult]) -> str:
        """Render results according to config.report_format"""
        if self.config.report_format == 'text':
            return self._generate_text_report(results)
        elif self.config.report_format == 'json':
            return self._generate_json_report(results)
        elif self.config.report_format == 'markdown':
            return self._generate_markdown_report(results)
        else:
            raise ValueError(f"Unsupported report format: {self.config.report_format}")

    def format_line(self, result: ScanResult) -> str:
        """Single "<path>: <status>" line, colored unless colors are off"""
        if not self.config.color:
            return result.line()
        status_color = STATUS_COLORS[result.status]
        return (f"{PATH_COLOR}{result.path}{Style.RESET_ALL}: "
                f"{status_color}{result.status.value}{Style.RESET_ALL}")

    def _generate_text_report(self, results: List[ScanResult]) -> str:
        return "\n".join(self.format_line(result) for result in results)

    def _generate_json_report(self, results: List[ScanResult]) -> str:
        report_data = {
            'report_info': {
                'generated_at': datetime.now().isoformat(),
                'scan_path': self.config.scan_path,
                'total_items': len(results),
                'summary': summarize(results),
            },
            'results': [
                {'path': result.path, 'status': result.status.value}
                for result in results
            ]
        }
        return json.dumps(report_data, indent=2)

    def _generate_markdown_report(self, results: List[ScanResult]) -> str:
        template = Template(MARKDOWN_TEMPLATE)
        return template.render(
            timestamp=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            scan_path=self.config.scan_path,
            summary=summarize(results),
            results=results,
        )
