from __future__ import annotations
from datetime import date
from io import BytesIO
from typing import List
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from models import CourseAverage, ExamPlanProjection, FocusSummary, Urgency


URGENCY_COLORS = {
    Urgency.GREEN: colors.HexColor("#059669"),
    Urgency.YELLOW: colors.HexColor("#d97706"),
    Urgency.RED: colors.HexColor("#dc2626"),
    Urgency.PAST: colors.grey,
}


def _grade_color(value: float):
    if value >= 7:
        return colors.HexColor("#059669")
    if value >= 4:
        return colors.HexColor("#d97706")
    return colors.HexColor("#dc2626")


def study_report_to_pdf(
    projections: List[ExamPlanProjection],
    summary: FocusSummary,
    averages: List[CourseAverage],
    today: date,
) -> bytes:
    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=letter,
        leftMargin=40,
        rightMargin=40,
        topMargin=40,
        bottomMargin=40,
    )
    styles = getSampleStyleSheet()
    elems = []

    elems.append(Paragraph("Taskademic: Academic Report", styles["Title"]))
    elems.append(Paragraph(f"Generated on {today.isoformat()}", styles["Normal"]))
    elems.append(Spacer(1, 12))

    elems.append(Paragraph("Focus", styles["Heading3"]))
    elems.append(Paragraph(
        f"Pomodoros: {summary.total_pomodoros} | Focus: {summary.total_minutes_focus}m "
        f"| Linked to tasks: {summary.minutes_linked_to_tasks}m "
        f"| Tasks completed: {summary.tasks_completed} | Streak: {summary.streak_days} days",
        styles["Normal"],
    ))
    elems.append(Spacer(1, 12))

    if projections:
        elems.append(Paragraph("Exam plans", styles["Heading3"]))
        table_data = [["Exam", "Date", "Days left", "Progress", "Min/day", "Status"]]
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
            ("ALIGN", (2, 1), (4, -1), "RIGHT"),
        ]
        for row, p in enumerate(projections, start=1):
            table_data.append([
                p.name,
                p.exam_date.isoformat(),
                "-" if p.is_past else str(p.days_remaining),
                f"{p.progress_pct}%",
                str(p.suggested_min_per_day),
                p.urgency.value,
            ])
            style.append(("TEXTCOLOR", (5, row), (5, row), URGENCY_COLORS[p.urgency]))
        table = Table(table_data, hAlign="LEFT")
        table.setStyle(TableStyle(style))
        elems.append(table)
        elems.append(Spacer(1, 12))

    if averages:
        elems.append(Paragraph("Grades by course", styles["Heading3"]))
        table_data = [["Course", "Exams", "Average"]]
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
            ("ALIGN", (1, 1), (2, -1), "RIGHT"),
        ]
        for row, avg in enumerate(averages, start=1):
            table_data.append([avg.course_name, str(avg.count), f"{avg.average:.2f}"])
            style.append(("TEXTCOLOR", (2, row), (2, row), _grade_color(avg.average)))
        table = Table(table_data, hAlign="LEFT", colWidths=[220, 60, 70])
        table.setStyle(TableStyle(style))
        elems.append(table)

    doc.build(elems)
    return buf.getvalue()
