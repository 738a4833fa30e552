import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from xml.sax.saxutils import escape

from garden.logic.reporting.history import aggregate_stats, format_plan_date, plan_summary, plan_yield


def generate_pdf_for_history(plans):
    """Table of saved plans (Date / Plants / Yield / Savings) with a totals row."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph("Garden Plans", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Date", "Plants", "Total Yield (lbs)", "Total Savings ($)"]]
    for plan in plans:
        data.append([
            format_plan_date(plan),
            Paragraph(escape(plan_summary(plan)), styles["BodyText"]),
            f"{plan_yield(plan):.2f}",
            f"{plan.total_estimated_savings:.2f}",
        ])
    stats = aggregate_stats(plans)
    data.append([
        f"{stats['total_plans']} plans", "",
        f"{stats['total_pounds']:.2f}",
        f"{stats['total_money']:.2f}",
    ])

    table = Table(data, repeatRows=1, colWidths=[90, 420, 120, 120])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2e7d32")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("BACKGROUND", (0, -1), (-1, -1), colors.HexColor("#f1f8e9")),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
