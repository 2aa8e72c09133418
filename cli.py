import argparse

from algorithms.math_tools import MathTools
from algorithms.one_rm import OneRMCalculator
from algorithms.percentile import calculate_strength_percentile
from algorithms.tiers import get_next_tier_info, get_strength_level_name, get_tier_info
from algorithms.weight_converter import WeightConverter
from config import load_settings
from logging_config import configure_logging


def estimate(weight: float, reps: int) -> None:
    one_rm = OneRMCalculator.estimate(weight, reps)
    print(f"{weight} x {reps} -> estimated 1RM {one_rm}")


def percentile(
    lift: float, body: float, exercise: str, gender: str, age: int | None, unit: str
) -> None:
    value = calculate_strength_percentile(
        WeightConverter.as_lbs(lift, unit),
        WeightConverter.as_lbs(body, unit),
        gender,
        exercise,
        age,
    )
    rounded = MathTools.round_half_up(value)
    info = get_tier_info(value)
    print(f"{exercise}: {rounded}{MathTools.ordinal_suffix(rounded)} percentile ({info.label})")


def tier(value: float) -> None:
    info = get_tier_info(value)
    upcoming = get_next_tier_info(value)
    print(f"{info.label} - {get_strength_level_name(value)}")
    if upcoming.next is None:
        print("Top tier reached")
    else:
        print(f"{upcoming.needed} points to {upcoming.next.value}")


def plan(one_rm: float, reps: int, increment: float) -> None:
    percentage = OneRMCalculator.get_percentage_for(reps)
    weight = OneRMCalculator.get_weight_for_percentage(one_rm, percentage)
    print(f"{reps} reps @ {percentage}% -> {MathTools.round_to_increment(weight, increment)}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Strength ranking utilities")
    parser.add_argument("--settings", default=None)
    sub = parser.add_subparsers(dest="cmd", required=True)

    est = sub.add_parser("estimate")
    est.add_argument("--weight", type=float, required=True)
    est.add_argument("--reps", type=int, required=True)

    pct = sub.add_parser("percentile")
    pct.add_argument("--lift", type=float, required=True)
    pct.add_argument("--body", type=float, required=True)
    pct.add_argument("--exercise", required=True)
    pct.add_argument("--gender", default="male")
    pct.add_argument("--age", type=int, default=None)
    pct.add_argument("--unit", choices=["lbs", "kg"], default=None)

    tr = sub.add_parser("tier")
    tr.add_argument("percentile", type=float)

    pln = sub.add_parser("plan")
    pln.add_argument("--one-rm", dest="one_rm", type=float, required=True)
    pln.add_argument("--reps", type=int, required=True)

    conv = sub.add_parser("convert")
    conv.add_argument("--weight", type=float, required=True)
    conv.add_argument("--unit", choices=["kg", "lbs"], required=True)

    args = parser.parse_args(argv)
    settings = load_settings(args.settings)
    configure_logging(settings)

    if args.cmd == "estimate":
        estimate(args.weight, args.reps)
    elif args.cmd == "percentile":
        percentile(
            args.lift, args.body, args.exercise, args.gender, args.age,
            args.unit or settings.weight_unit,
        )
    elif args.cmd == "tier":
        tier(args.percentile)
    elif args.cmd == "plan":
        plan(args.one_rm, args.reps, settings.weight_increment)
    elif args.cmd == "convert":
        if args.unit == "kg":
            print(f"{args.weight} kg = {WeightConverter.kg_to_lb(args.weight)} lbs")
        else:
            print(f"{args.weight} lbs = {WeightConverter.lb_to_kg(args.weight)} kg")


if __name__ == "__main__":
    main()
