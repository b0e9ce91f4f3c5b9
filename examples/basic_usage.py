"""
Basic usage example for Glo ratings.
"""

import logging

from glo_rating import (
    GloRatingSystem,
    PerformanceRatingInput,
    RatingUpdateInput,
    calc_performance_rating,
    calc_rating_updates,
    to_score,
)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("Glo Rating Demonstration")
    print("------------------------")

    # Using the pure functions directly
    hole_ratings = [1450, 1520, 1610]
    strokes = [0, -1, 1]
    total_score = sum(to_score(s) for s in strokes)
    performance_rating = calc_performance_rating(
        PerformanceRatingInput(hole_ratings=hole_ratings, total_score=total_score)
    )
    print(f"\nTotal score: {total_score:.4f}")
    print(f"Performance rating: {performance_rating:.1f}")

    player_rating = 1580.0
    for hole_rating, hole_strokes in zip(hole_ratings, strokes):
        result = calc_rating_updates(
            RatingUpdateInput(
                player_rating=player_rating,
                hole_rating=hole_rating,
                strokes=hole_strokes,
                performance_rating=performance_rating,
            )
        )
        print(f"Hole {hole_rating} ({hole_strokes:+d}): player {result.player_rating:.2f}, hole {result.hole_rating:.2f}")
        player_rating = result.player_rating

    # Letting the system keep track of ratings
    glo_system = GloRatingSystem()
    rounds = {
        "alice": [-1, 0, -1, 0, 0, -1, 0, 1, -1],
        "bob": [1, 1, 0, 2, 1, 0, 1, 1, 0],
        "carol": [0, 0, 1, -1, 0, 0, 0, 0, 1],
    }
    for _ in range(5):
        for player_id, scores in rounds.items():
            glo_system.record_round(player_id, list(zip(range(1, 10), scores)))

    print("\nPlayer ratings:")
    for player_id in glo_system.rankings():
        print(f"{player_id}: {glo_system.get_player_rating(player_id):.2f}")

    print("\nHole ratings:")
    for hole_id in sorted(glo_system.hole_ratings):
        print(f"Hole {hole_id}: {glo_system.get_hole_rating(hole_id):.2f}")


if __name__ == "__main__":
    main()
