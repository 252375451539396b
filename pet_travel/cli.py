"""pet-travel CLI entry point."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional

from dotenv import load_dotenv

from pet_travel.config.settings import resolve_settings
from pet_travel.domain.enums import Airport, Destination, Species
from pet_travel.domain.exceptions import InvalidTravelRequest
from pet_travel.services.plan_presenter import render_plan_markdown, render_plan_text
from pet_travel.services.plan_service import execute_plan

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pet-travel",
        description="Cronograma de prazos para viagem internacional com pets.",
    )
    parser.add_argument("--pet-name", default="", help="nome do pet (apenas exibição)")
    parser.add_argument("--species", help=" / ".join(item.value for item in Species))
    parser.add_argument("--destination", help=" / ".join(item.value for item in Destination))
    parser.add_argument("--airport", default=Airport.NONE.value, help="aeroporto de chegada nos EUA")
    parser.add_argument("--weight", default="0", help="peso do cão em kg")
    parser.add_argument("--birth", help="data de nascimento (yyyy-mm-dd ou dd/mm/yyyy)")
    parser.add_argument("--vaccine", help="data da vacina antirrábica")
    parser.add_argument("--blood", help="data da coleta de sangue")
    parser.add_argument("--travel", help="data planejada da viagem")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="imprime o plano em JSON")
    output.add_argument("--markdown", action="store_true", help="imprime o plano em Markdown")
    return parser


def _form_from_args(args: argparse.Namespace) -> dict[str, Optional[str]]:
    return {
        "pet_name": args.pet_name,
        "species": args.species,
        "destination": args.destination,
        "arrival_airport": args.airport,
        "weight_kg": args.weight,
        "birth_date": args.birth,
        "vaccination_date": args.vaccine,
        "blood_collection_date": args.blood,
        "travel_date": args.travel,
    }


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = resolve_settings()

    try:
        result = execute_plan(_form_from_args(args), settings=settings)
    except InvalidTravelRequest as exc:
        print("❌ Dados inválidos:", file=sys.stderr)
        for detail in exc.details:
            print(f"  - {detail}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if result.autofilled_fields and not args.json:
        print(
            f"ℹ️ Coleta de sangue não informada; usando a sugestão "
            f"{result.request.blood_collection_date:%d/%m/%Y}.",
            file=sys.stderr,
        )

    request = result.request
    if args.json:
        print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
    elif args.markdown:
        print(render_plan_markdown(result.plan, request.pet_name, request.destination, request.species), end="")
    else:
        print(render_plan_text(result.plan, request.pet_name, request.destination, request.species), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
