"""Checklist renderers for terminal and Markdown export."""

from __future__ import annotations

from typing import Optional

from pet_travel.domain.enums import Destination, Species, Status
from pet_travel.domain.models import TravelPlan

STATUS_ICONS = {
    Status.OK: "✅",
    Status.WARNING: "⚠️",
    Status.INFO: "ℹ️",
    Status.ERROR: "❌",
}


def plan_title(pet_name: str) -> str:
    name = str(pet_name or "").strip().upper()
    return f"📅 CRONOGRAMA DE VIAGEM PARA {name}".rstrip()


def plan_subtitle(destination: Optional[Destination], species: Optional[Species] = None) -> str:
    if destination is None:
        return ""
    icon = "🐕" if species == Species.DOG else "🐱"
    return f"DESTINO: {destination.value.upper()} {icon}"


def render_plan_text(
    plan: TravelPlan,
    pet_name: str = "",
    destination: Optional[Destination] = None,
    species: Optional[Species] = None,
) -> str:
    lines: list[str] = [plan_title(pet_name)]
    subtitle = plan_subtitle(destination, species)
    if subtitle:
        lines.append(subtitle)
    lines.append("=" * 50)
    if plan.is_empty():
        lines.append("Nenhuma regra aplicável: preencha todas as datas, a espécie e o destino.")
        return "\n".join(lines) + "\n"

    for section, messages in plan.sections():
        if not messages:
            continue
        lines.append("")
        lines.append(section.heading)
        lines.append("-" * 50)
        for message in messages:
            lines.append(f"  {STATUS_ICONS[message.status]} {message.text}")
    return "\n".join(lines) + "\n"


def render_plan_markdown(
    plan: TravelPlan,
    pet_name: str = "",
    destination: Optional[Destination] = None,
    species: Optional[Species] = None,
) -> str:
    lines: list[str] = [f"# {plan_title(pet_name)}", ""]
    subtitle = plan_subtitle(destination, species)
    if subtitle:
        lines.extend([f"**{subtitle}**", ""])
    counts = plan.count_by_status()
    for status in Status:
        if counts.get(status.value):
            lines.append(f"- {status.value}: `{counts[status.value]}`")
    if not plan.is_empty():
        lines.append("")

    for section, messages in plan.sections():
        if not messages:
            continue
        lines.append(f"## {section.heading}")
        for message in messages:
            text = message.text.replace("\n", " ").strip()
            lines.append(f"- {STATUS_ICONS[message.status]} **{message.status.value}** {text}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


__all__ = ["STATUS_ICONS", "plan_subtitle", "plan_title", "render_plan_markdown", "render_plan_text"]
