#!/usr/bin/env python3
"""
Balance simulation for the breeding engine.
Runs many seeded breedings of two template parents and prints outcome rates.
"""

import sys
import argparse
import random
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import Creature, Rarity, StatBlock, STAT_KEYS
from data.loader import load_recipes
from game.offspring import generate_offspring
from game.recipes import find_matching_recipe


# Colors for terminal output
class Colors:
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


def colored_print(message, color=None):
    """Print message with color if terminal supports it"""
    if color and sys.stdout.isatty():
        print(f"{color}{message}{Colors.RESET}")
    else:
        print(message)


def template_parent(creature_id, species, args):
    """Parent built from the command-line template values"""
    return Creature(
        creature_id=creature_id,
        species=species,
        level=args.level,
        rarity=Rarity.parse(args.rarity),
        generation=args.generation,
        stats=StatBlock.uniform(args.stat),
        abilities=tuple(f"{species}_ability_{i}" for i in range(args.abilities)),
        passive_traits=tuple(f"{species}_trait_{i}" for i in range(args.traits)),
    )


def simulate(args):
    """Run the breedings and collect totals"""
    parent1 = template_parent("sim_parent_1", args.species1, args)
    parent2 = template_parent("sim_parent_2", args.species2, args)

    recipe = None
    if args.use_recipes:
        recipe = find_matching_recipe(parent1.species, parent2.species, load_recipes())

    rng = random.Random(args.seed)
    totals = {
        "upgrades": 0,
        "abilities": 0,
        "traits": 0,
        "stats": {stat: 0 for stat in STAT_KEYS},
    }

    result = None
    for _ in range(args.runs):
        result = generate_offspring(parent1, parent2, rng, recipe)
        totals["upgrades"] += int(result.rarity_upgraded)
        totals["abilities"] += len(result.inherited_abilities)
        totals["traits"] += len(result.offspring.passive_traits)
        for stat in STAT_KEYS:
            totals["stats"][stat] += result.offspring.stats.get(stat)

    return recipe, result, totals


def print_report(args, recipe, last_result, totals):
    runs = args.runs
    colored_print("\n" + "=" * 60, Colors.BLUE)
    colored_print(f"Breeding simulation: {args.species1} x {args.species2} ({runs} runs)", Colors.BOLD + Colors.BLUE)
    colored_print("=" * 60 + "\n", Colors.BLUE)

    if recipe is not None:
        colored_print(f"Recipe: {recipe.name} -> {recipe.offspring_species}", Colors.YELLOW)

    print(f"Offspring generation: {last_result.generation}")
    print(f"Cost per breeding:    {last_result.cost_paid.gold_amount:,} gold")
    print(f"Rarity upgrade rate:  {totals['upgrades'] / runs:.2%}")
    print(f"Mean abilities:       {totals['abilities'] / runs:.2f}")
    print(f"Mean passive traits:  {totals['traits'] / runs:.2f}")
    print("\nMean stats:")
    for stat in STAT_KEYS:
        print(f"  {stat:<14} {totals['stats'][stat] / runs:8.2f}")
    colored_print("\n✓ Simulation complete", Colors.GREEN + Colors.BOLD)


def main(argv=None):
    """Main entry point"""
    parser = argparse.ArgumentParser(
        description="Simulate breedings of two template parents"
    )
    parser.add_argument("--species1", default="slime", help="Species of the first parent")
    parser.add_argument("--species2", default="slime", help="Species of the second parent")
    parser.add_argument("--runs", type=int, default=1000, help="Number of breedings (default: 1000)")
    parser.add_argument("--seed", type=int, default=0, help="RNG seed (default: 0)")
    parser.add_argument("--level", type=int, default=10, help="Parent level (default: 10)")
    parser.add_argument("--rarity", default="common", help="Parent rarity (default: common)")
    parser.add_argument("--generation", type=int, default=0, help="Parent generation (default: 0)")
    parser.add_argument("--stat", type=int, default=100, help="Value for every parent stat (default: 100)")
    parser.add_argument("--abilities", type=int, default=4, help="Abilities per parent (default: 4)")
    parser.add_argument("--traits", type=int, default=2, help="Passive traits per parent (default: 2)")
    parser.add_argument(
        "--use-recipes",
        action="store_true",
        help="Apply the matching catalog recipe, if any"
    )

    args = parser.parse_args(argv)

    if args.runs < 1:
        parser.error("--runs must be at least 1")

    recipe, last_result, totals = simulate(args)
    print_report(args, recipe, last_result, totals)
    return 0


if __name__ == "__main__":
    sys.exit(main())
