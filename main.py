"""Simple entrypoint to try the outfit stylist against the demo wardrobe."""

import argparse

from models.taxonomy import OCCASIONS, SEASONS
from stylist_app.app import StylistApp


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Recommend outfits from the sample wardrobe")
    parser.add_argument("occasion", choices=OCCASIONS)
    parser.add_argument("--season", choices=SEASONS)
    parser.add_argument("--color", action="append", dest="colors", help="preferred color family")
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--quick", action="store_true", help="use quick suggestions")
    args = parser.parse_args(argv)

    app = StylistApp()
    user_id = "demo-user"
    app.seed_wardrobe(user_id)
    if args.quick:
        outfits = app.quick_suggestions(user_id=user_id, occasion=args.occasion, max_suggestions=args.limit)
    else:
        outfits = app.recommend(
            user_id=user_id,
            occasion=args.occasion,
            season=args.season,
            preferred_colors=args.colors,
            max_recommendations=args.limit,
        )

    if not outfits:
        print("No outfits could be assembled for this occasion.")
    for rank, outfit in enumerate(outfits, start=1):
        names = ", ".join(item.name for item in outfit.items)
        print(f"{rank}. [{outfit.confidence:.2f}] {names}")
        print(f"   {outfit.reasoning}")


if __name__ == "__main__":
    main()
