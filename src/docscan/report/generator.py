"""Grouped invoice report rendering."""
import json
from typing import Dict, List

from ..scanner.models import Record
from ..utils.exceptions import ConfigError
from ..utils.logger import get_logger

logger = get_logger()

GROUP_ORDERS = ("insertion", "sorted")
FORMATS = ("text", "json")
DATE_FORMAT = "%Y-%m-%d"


class ReportGenerator:
    """Groups records by their group field and renders them."""

    def __init__(self, group_order: str = "insertion"):
        if group_order not in GROUP_ORDERS:
            raise ConfigError(
                f"Unknown group order '{group_order}', expected one of {', '.join(GROUP_ORDERS)}"
            )
        self.group_order = group_order

    def group(self, records: List[Record]) -> Dict[str, List[Record]]:
        """
        Partition records by group.

        Records keep their relative order inside a group. Groups come in the
        order they were first seen, or by name when group_order is "sorted".
        """
        groups: Dict[str, List[Record]] = {}
        for record in records:
            groups.setdefault(record.group, []).append(record)

        if self.group_order == "sorted":
            groups = {name: groups[name] for name in sorted(groups)}

        logger.debug(f"Grouped {len(records)} records into {len(groups)} groups")
        return groups

    def render_text(self, records: List[Record]) -> str:
        """Header line per group, one tab-separated line per record, then a blank line."""
        lines = []
        for name, members in self.group(records).items():
            lines.append(f"{name}\n")
            for record in members:
                lines.append(
                    f"{record.date.strftime(DATE_FORMAT)}\t{record.price}\t"
                    f"{record.establishment}\t{record.category}\n"
                )
            lines.append("\n")
        return "".join(lines)

    def render_json(self, records: List[Record]) -> str:
        """Same grouping as render_text, as a JSON object keyed by group."""
        payload = {
            name: [
                {
                    "date": record.date.strftime(DATE_FORMAT),
                    "price": record.price,
                    "establishment": record.establishment,
                    "category": record.category
                }
                for record in members
            ]
            for name, members in self.group(records).items()
        }
        return json.dumps(payload, ensure_ascii=False, indent=4)

    def render(self, records: List[Record], output_format: str = "text") -> str:
        if output_format == "json":
            return self.render_json(records)
        if output_format == "text":
            return self.render_text(records)
        raise ConfigError(f"Unknown report format '{output_format}', expected one of {', '.join(FORMATS)}")


def generate_report(records: List[Record], group_order: str = "insertion") -> str:
    """Render the grouped text report for a list of records."""
    return ReportGenerator(group_order).render_text(records)


def render_json(records: List[Record], group_order: str = "insertion") -> str:
    """Render the grouped report as JSON."""
    return ReportGenerator(group_order).render_json(records)
