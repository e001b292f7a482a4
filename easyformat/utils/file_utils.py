"""File export helpers for the easyformat CLI."""
import os
import re
import csv
import sys
import markdown

_SECTION_HEADING = re.compile(r"^### ", re.MULTILINE)


def write_csv(filename: str, headers: list, rows: list):
    """Write a table to a CSV file.

    Args:
        filename: Output file name
        headers: Column headers
        rows: Data rows
    """
    with open(filename, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(headers)
        writer.writerows(rows)


def count_rendered_tables(content: str) -> int:
    """Count the tables Markdown renders from a showcase report."""
    html = markdown.markdown(content, extensions=['tables'])
    return html.count("<table>")


def write_markdown(md_path: str, content: str, title: str, overwrite: bool = False):
    """Write a showcase report to a Markdown file.

    Every "### " section of the report must render as a Markdown table;
    otherwise nothing is written and the process exits with status 3.

    Args:
        md_path: Output file path
        content: Showcase report
        title: Heading written at the top of a new file
        overwrite: Whether to replace an existing file instead of appending
    """
    sections = len(_SECTION_HEADING.findall(content))
    tables = count_rendered_tables(content)
    if tables < sections:
        print(f"[ERROR] Only {tables} of {sections} showcase tables render as Markdown tables.")
        sys.exit(3)

    if os.path.exists(md_path) and not overwrite:
        mode = 'a'
        print(f"[INFO] Appending showcase to '{md_path}'.")
    else:
        mode = 'w'
        print(f"[INFO] Writing showcase to '{md_path}'.")

    try:
        with open(md_path, mode, encoding='utf-8') as f:
            if mode == 'w' or f.tell() == 0:
                f.write(f"# {title}\n\n")
            f.write(content)
    except OSError as e:
        print(f"[ERROR] Failed to write to '{md_path}': {e}")
        sys.exit(2)
