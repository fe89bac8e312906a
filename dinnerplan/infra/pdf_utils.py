import io
from typing import List, Optional

from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from dinnerplan.domain.Plan import Plan
from dinnerplan.domain.ShoppingList import ShoppingListEntry
from dinnerplan.domain.Weather import WeatherClassification


def _table(data, header_color: str) -> Table:
    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor(header_color)),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))
    return table


def generate_pdf_for_plan(plan: Plan, shopping_list: List[ShoppingListEntry],
                          weather: Optional[WeatherClassification] = None) -> bytes:
    """Generate a PDF with a Day / Dinner / Time table followed by the shopping list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [Paragraph("Weekly Dinner Plan", styles["Title"])]
    if weather is not None:
        elements.append(Paragraph(str(weather), styles["Normal"]))
    elements.append(Spacer(1, 16))

    data = [["Day", "Dinner", "Time"]]
    for day in plan:
        if day.dinner:
            data.append([day.day_name, day.dinner.name, f"{day.dinner.total_time} mins"])
        else:
            data.append([day.day_name, "-", ""])
    elements.append(_table(data, "#4CAF50"))

    elements.append(Spacer(1, 16))
    elements.append(Paragraph("Shopping List", styles["Heading2"]))
    items = [["Ingredient", "Recipes"]]
    items.extend([entry.ingredient, str(entry.frequency)] for entry in shopping_list)
    elements.append(_table(items, "#2196F3"))

    doc.build(elements)
    return buf.getvalue()
