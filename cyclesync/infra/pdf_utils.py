import io
from datetime import timedelta
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from cyclesync.domain.Plan import WeekPlan
from cyclesync.utilities.dates import parse_local_date_string, to_local_date_string


def generate_pdf_for_week(week: WeekPlan) -> bytes:
    """Render one plan week as a Day / Date / Planned session table."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [Paragraph(f"Training Plan – Week of {week.week_start}", styles["Title"])]
    if week.focus:
        elements.append(Paragraph(f"Focus: {escape(week.focus)}", styles["Heading2"]))
    elements.append(Spacer(1, 16))

    start = parse_local_date_string(week.week_start)
    data = [["Day", "Date", "Planned session"]]
    for i, day in enumerate(week.days):
        day_date = to_local_date_string(start + timedelta(days=i)) if start else ""
        data.append([day.name, day_date, Paragraph(escape(day.planned) or "-", styles["BodyText"])])

    table = Table(data, repeatRows=1, colWidths=[80, 100, 500])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#a78bfa")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (1,-1), "CENTER"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
