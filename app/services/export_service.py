import io
from sqlalchemy.orm import Session
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter
import app.services.dashboard_service as dashboard


_HEADER_FILL = PatternFill(start_color="1C2D42", end_color="1C2D42", fill_type="solid")
_HEADER_FONT = Font(bold=True, color="F5A623", size=11)


def _write_header(ws, headers: list[str], widths: list[int]) -> None:
    for col, h in enumerate(headers, 1):
        cell = ws.cell(row=1, column=col, value=h)
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL
        cell.alignment = Alignment(horizontal="center")
    for i, w in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(i)].width = w
    ws.row_dimensions[1].height = 22
    ws.freeze_panes = "A2"


def export_roster_excel(db: Session) -> bytes:
    """Two sheets: computers with occupancy, students with their current computer."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Počítače"
    _write_header(
        ws,
        ["ID", "Název", "Umístění", "Počet studentů", "Vytížení (%)"],
        [6, 28, 24, 16, 14],
    )
    for row_num, c in enumerate(dashboard.computers_with_counts(db), 2):
        ws.cell(row=row_num, column=1, value=c["id"])
        ws.cell(row=row_num, column=2, value=c["name"])
        ws.cell(row=row_num, column=3, value=c["location"] or "")
        ws.cell(row=row_num, column=4, value=c["student_count"])
        ws.cell(row=row_num, column=5, value=c["load_percent"])

    ws2 = wb.create_sheet("Studenti")
    _write_header(
        ws2,
        ["ID", "Jméno", "Číslo studenta", "Sekce", "Počítač"],
        [6, 28, 18, 8, 28],
    )
    for row_num, s in enumerate(dashboard.students_with_computer(db), 2):
        ws2.cell(row=row_num, column=1, value=s["id"])
        ws2.cell(row=row_num, column=2, value=s["name"])
        ws2.cell(row=row_num, column=3, value=s["student_id"])
        ws2.cell(row=row_num, column=4, value=s["section"].value if s["section"] else "")
        ws2.cell(row=row_num, column=5, value=s["computer_name"] or "Nepřiřazen")

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()
