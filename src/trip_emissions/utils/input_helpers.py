import logging
from typing import List, Optional

from colorama import Fore, Style, Back

from ..models import CalculatorSettings, TripResult, ComparisonEntry
from .calculations import as_finite_number, f2

logger = logging.getLogger(__name__)

# Style Constants
C_HEADER = Fore.CYAN + Style.BRIGHT
C_PROMPT = Fore.YELLOW
C_CHOICE = Fore.MAGENTA
C_ERROR = Fore.RED
C_SUCCESS = Fore.GREEN
C_RESET = Style.RESET_ALL


def style_prompt(prompt_text: str) -> str:
    """Helper to wrap input prompt in color."""
    return f"{C_PROMPT}{prompt_text}{C_RESET}"


def print_header(text: str):
    """Print a styled header."""
    print(f"\n{C_HEADER}{'='*60}")
    print(f"{text.center(60)}")
    print(f"{'='*60}{C_RESET}")


def prompt_choice(label: str, options: List[str], default: str) -> str:
    """
    Prompt user to pick one value from a list of options; returns the chosen option.
    Supports selecting by index (1-based) or typing the name.
    """
    display_parts = []
    for idx, opt in enumerate(options, 1):
        display_parts.append(f"[{C_SUCCESS}{idx}{C_PROMPT}] {C_CHOICE}{opt}{C_PROMPT}")

    opts_str = " / ".join(display_parts)

    while True:
        print(f"\n{C_PROMPT}{label} options:{C_RESET} {opts_str}")
        s = input(style_prompt(f"Select option (name or number) [default={default}]: ")).strip().lower()

        if not s:
            return default

        if s.isdigit():
            idx = int(s)
            if 1 <= idx <= len(options):
                return options[idx-1]

        for opt in options:
            if s == opt.lower():
                return opt

        logger.warning(f"Invalid choice '{s}'. Please enter a number 1-{len(options)} or the option name.")


def prompt_yes_no(label: str, default: bool) -> bool:
    """
    Prompt user for yes/no answer, returning True/False.
    """
    d = "y" if default else "n"
    opts = f"{C_CHOICE}y{C_PROMPT}/{C_CHOICE}n{C_PROMPT}"
    while True:
        s = input(style_prompt(f"{label} [{opts}] (default={d}): ")).strip().lower()
        if not s:
            return default
        if s in ("y", "yes"):
            return True
        if s in ("n", "no"):
            return False
        logger.warning("Please answer y or n.")


def prompt_float(label: str, minimum: Optional[float] = None, exclusive: bool = False) -> float:
    """
    Prompt until the user enters a finite number (optionally bounded below).
    """
    while True:
        s = input(style_prompt(f"{label}: ")).strip().replace(",", ".")
        value = as_finite_number(s)
        if value is None:
            logger.warning(f"'{s}' is not a number.")
            continue
        if minimum is not None and (value < minimum or (exclusive and value == minimum)):
            bound = ">" if exclusive else ">="
            logger.warning(f"Value must be {bound} {minimum}.")
            continue
        return value


def prompt_location(label: str, known: List[str]) -> str:
    """
    Prompt for a location name. Typing '?' lists the known locations; a known
    location can also be picked by its number in that list.
    """
    while True:
        s = input(style_prompt(f"Enter {label} (or '?' for known locations): ")).strip()
        if not s:
            logger.warning(f"{label.capitalize()} is required.")
            continue
        if s == "?":
            for idx, name in enumerate(known, 1):
                print(f"  [{C_SUCCESS}{idx}{C_RESET}] {name}")
            continue
        if s.isdigit() and 1 <= int(s) <= len(known):
            return known[int(s) - 1]
        return s


def print_trip_overview(result: TripResult, settings: CalculatorSettings):
    """
    Trip summary: route, distance, selected mode emission and savings vs baseline.
    """
    print(f"\n{Back.BLACK}{C_HEADER}{'='*60}")
    print(f"   TRIP RESULT: {result.origin} -> {result.destination}")
    print(f"{'='*60}{Style.RESET_ALL}")

    source = "known route" if result.distance_source == "route_table" else "entered manually"
    print(f"  Distance:            {f2(result.distance_km)} km ({source})")
    print(f"  Transport mode:      {settings.mode_label(result.mode)}")
    print(f"  {Style.BRIGHT}Emission:            {C_SUCCESS}{f2(result.emission_kg)}{C_RESET} {Style.BRIGHT}kg CO2{C_RESET}")

    baseline_label = settings.mode_label(settings.reference_mode)
    if result.savings is None:
        print(f"  Savings vs {baseline_label}:    n/a")
    elif result.mode != settings.reference_mode:
        pct = "n/a" if result.savings.percentage is None else f"{f2(result.savings.percentage)}%"
        print(f"  Savings vs {baseline_label}:    {f2(result.savings.saved_kg)} kg CO2 ({pct})")


def print_comparison_table(entries: List[ComparisonEntry], settings: CalculatorSettings, selected_mode: str = ""):
    """
    Text table of the mode comparison, lowest emission first.
    """
    print(f"\n{C_HEADER}Comparison of transport modes:{C_RESET}")
    print("-" * 60)
    print(f"{'Mode':<20} | {'Emission (kg CO2)':<18} | {'% vs baseline':<14}")
    print("-" * 60)
    for e in entries:
        emission = "n/a" if e.emission is None else f2(e.emission)
        pct = "n/a" if e.percentage_vs_car is None else f"{f2(e.percentage_vs_car)}%"
        marker = " *" if e.mode == selected_mode else ""
        print(f"{settings.mode_label(e.mode) + marker:<20} | {emission:<18} | {pct:<14}")
    print("-" * 60)


def print_credit_overview(result: TripResult, settings: CalculatorSettings):
    """
    Carbon credits needed to offset the trip and their estimated price.
    """
    currency = settings.credit_policy.currency
    print(f"\n{C_HEADER}Carbon credits:{C_RESET}")
    print(f"  Credits to offset:   {result.credits:.4f}")
    print(f"  Price range:         {f2(result.price.min)} - {f2(result.price.max)} {currency}")
    print(f"  Average price:       {f2(result.price.average)} {currency}")
    print(f"  (1 credit = {settings.credit_policy.kg_per_credit:g} kg CO2)")
    print(f"{'='*60}\n")
