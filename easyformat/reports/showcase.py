"""ShowcaseGenerator: renders tables of sample formats for one locale and instant."""
from io import StringIO
from typing import Callable, List, Optional, Tuple

from tabulate import tabulate

from ..api import entry as ef
from ..errors import EasyFormatError
from ..formatting.formatter import Formatter
from ..formatting.skeletons import GROUPS, SKELETONS, mnemonics_in_group
from ..utils.date_utils import PointInTime
from ..utils.locale_utils import LocaleLike

Item = Tuple[str, str, Callable[[LocaleLike], Formatter]]

SECTIONS: List[Tuple[str, List[Item]]] = [
    ("Basic Date Formatting", [
        ("Date", 'yMMMd(locale)', lambda loc: ef.yMMMd(loc)),
        ("Date+Weekday", 'yMMMEd(locale)', lambda loc: ef.yMMMEd(loc)),
    ]),
    ("Time Formatting", [
        ("24h", 'Hm(locale)', lambda loc: ef.Hm(loc)),
        ("24h+seconds", 'Hms(locale)', lambda loc: ef.Hms(loc)),
        ("12h", 'hm(locale)', lambda loc: ef.hm(loc)),
        ("12h+seconds", 'hms(locale)', lambda loc: ef.hms(loc)),
        ("Locale-specific", 'jm(locale)', lambda loc: ef.jm(loc)),
        ("Locale-specific+seconds", 'jms(locale)', lambda loc: ef.jms(loc)),
    ]),
    ("Method Chaining", [
        ("Date+Time+Seconds", 'yMMMd(locale).Hms(locale)', lambda loc: ef.yMMMd(loc).Hms(loc)),
        ("Time+Seconds+Date", 'Hms(locale).yMMMd(locale)', lambda loc: ef.Hms(loc).yMMMd(loc)),
        ("Date+Weekday", 'yMMMd(locale).E()', lambda loc: ef.yMMMd(loc).E()),
        ("Date+Weekday+Time+Seconds", 'yMMMEd(locale).Hms()', lambda loc: ef.yMMMEd(loc).Hms()),
    ]),
    ("Locale-First Chaining", [
        ("Date+Time+Seconds", 'locale(locale).yMMMd().Hms()', lambda loc: ef.locale(loc).yMMMd().Hms()),
        ("Custom", 'locale(locale).custom("yMMMMd")', lambda loc: ef.locale(loc).custom("yMMMMd")),
    ]),
    ("Custom Skeletons", [
        ("yMd", 'custom("yMd", locale)', lambda loc: ef.custom("yMd", loc)),
        ("MMMd", 'custom("MMMd", locale)', lambda loc: ef.custom("MMMd", loc)),
        ("Locale-specific time", 'custom("jm", locale)', lambda loc: ef.custom("jm", loc)),
    ]),
    ("Combinations", [
        ("Date+Time+Zone", 'yMMMd(locale).Hm().z()', lambda loc: ef.yMMMd(loc).Hm().z()),
        ("Date+Week+Quarter", 'yMMMd(locale).w().Q()', lambda loc: ef.yMMMd(loc).w().Q()),
        ("Full DateTime+Zone", 'yMMMEd(locale).Hms().zzzz()', lambda loc: ef.yMMMEd(loc).Hms().zzzz()),
        ("Week+Quarter", 'locale(locale).w().QQQ()', lambda loc: ef.locale(loc).w().QQQ()),
        ("Era+Year", 'locale(locale).G().u()', lambda loc: ef.locale(loc).G().u()),
    ]),
]

HEADERS = ["Label", "Expression", "Skeleton", "Result"]
CATALOG_HEADERS = ["Mnemonic", "Group", "Description", "Result"]


class ShowcaseGenerator:
    """Renders every showcase section and the skeleton catalog for one locale."""

    def __init__(self, locale: LocaleLike, value: PointInTime, header: str = ""):
        """Initialize a ShowcaseGenerator.

        Args:
            locale: Locale to format for
            value: Point in time to format
            header: Text appended to every section title (optional)
        """
        self.locale = locale
        self.value = value
        self.header = header

    def render(self, formatter: Formatter) -> str:
        """Format the showcase value, reporting failures in place of a result."""
        try:
            return formatter.format(self.value)
        except EasyFormatError as e:
            return f"error: {e}"

    def section_rows(self, items: List[Item]) -> List[List[str]]:
        rows = []
        for label, expression, factory in items:
            formatter = factory(self.locale)
            rows.append([label, expression, formatter.skeleton, self.render(formatter)])
        return rows

    def catalog_rows(self, group: Optional[str] = None) -> List[List[str]]:
        groups = [group] if group else GROUPS
        rows = []
        for name in groups:
            for mnemonic in mnemonics_in_group(name):
                entry = SKELETONS[mnemonic]
                formatter = Formatter(entry.token, self.locale)
                rows.append([mnemonic, entry.group, entry.description, self.render(formatter)])
        return rows

    def generate_report(self, csv_prefix: Optional[str] = None, catalog: bool = True) -> str:
        """Generate all showcase tables.

        Args:
            csv_prefix: Prefix for CSV files (optional)
            catalog: Whether to include the full catalog table

        Returns:
            Report as a string
        """
        output = StringIO()

        for index, (title, items) in enumerate(SECTIONS, start=1):
            rows = self.section_rows(items)
            print(f"\n### {index}. {title} {self.header}".rstrip() + ":", file=output)
            print(tabulate(rows, headers=HEADERS, tablefmt="github"), file=output)

            if csv_prefix:
                from ..utils.file_utils import write_csv
                slug = title.lower().replace(" ", "_").replace("-", "_")
                write_csv(f"{csv_prefix}_{slug}.csv", HEADERS, rows)

        if catalog:
            self._generate_catalog_table(output, csv_prefix)

        return output.getvalue()

    def _generate_catalog_table(self, output: StringIO, csv_prefix: Optional[str] = None):
        rows = self.catalog_rows()
        print(f"\n### Skeleton Catalog {self.header}".rstrip() + ":", file=output)
        print(tabulate(rows, headers=CATALOG_HEADERS, tablefmt="github"), file=output)

        if csv_prefix:
            from ..utils.file_utils import write_csv
            write_csv(f"{csv_prefix}_catalog.csv", CATALOG_HEADERS, rows)
