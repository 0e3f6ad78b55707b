# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from marktally.view.state import get_show_header


def header(report_name: str, sub_header: Optional[str] = None) -> None:
    """Print the application banner with the report name.

    Args:
        report_name: The name of the report being printed
        sub_header: Optional detail line, such as the active range
    """
    if not get_show_header():
        return

    print(Padding("[dark_orange]marktally[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[plum1]{report_name}[/plum1]", (0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
