import io
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from grocer.domain.Plan import MealPlan
from grocer.domain.ShoppingList import ShoppingListItem

_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("ALIGN", (0, 0), (-1, -1), "CENTER"),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 12),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
])


def _fmt(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def generate_pdf_for_plan(plan: MealPlan, items: List[ShoppingListItem]) -> bytes:
    """Generate a printable PDF: the plan's meals followed by its shopping list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20)

    styles = getSampleStyleSheet()
    start = plan.start_date.strftime("%Y-%m-%d") if plan.start_date else plan.created_at.strftime("%Y-%m-%d")
    elements = [
        Paragraph(f"Meal Plan - {plan.days} days from {start}", styles["Title"]),
        Spacer(1, 16),
    ]

    meals = [["Day", "Recipe", "Servings"]]
    for day, recipe in enumerate(plan.recipes, start=1):
        meals.append([str(day), recipe.name, str(recipe.servings)])
    meals_table = Table(meals, repeatRows=1)
    meals_table.setStyle(_TABLE_STYLE)
    elements.extend([meals_table, Spacer(1, 24), Paragraph("Shopping List", styles["Heading2"]), Spacer(1, 8)])

    rows = [["Item", "Needed", "Unit", "In pantry", "To buy", "Packs"]]
    for item in items:
        rows.append([item.name, _fmt(item.quantity), item.unit, _fmt(item.in_pantry),
                     _fmt(item.adjusted_quantity), _fmt(item.packs_needed)])
    list_table = Table(rows, repeatRows=1)
    list_table.setStyle(_TABLE_STYLE)
    elements.append(list_table)

    doc.build(elements)
    return buf.getvalue()
