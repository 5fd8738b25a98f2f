class ZeroDurationError(ZeroDivisionError):
    """A station's average trip duration is zero, so its rush score is undefined."""


def score_stations(by_station):
    """Rush Hour Score = trips * rush_share / avg_duration, highest first.

    Raises ZeroDurationError instead of producing inf/NaN scores.
    """
    zero = by_station["avg_duration"] == 0
    if zero.any():
        names = ", ".join(by_station.loc[zero, "station"].astype(str))
        raise ZeroDurationError(f"avg_duration is 0 for: {names}")

    scored = by_station.copy()
    scored["rush_score"] = scored["trips"] * scored["rush_share"] / scored["avg_duration"]
    return scored.sort_values("rush_score", ascending=False, kind="stable").reset_index(drop=True)
