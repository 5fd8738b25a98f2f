from trip_generator import RUSH_HOURS


def add_features(trips):
    """Return a copy of ``trips`` with day, hour, dow and is_rush appended."""
    df = trips.copy()
    started = df["started_at"].dt
    df["day"] = started.normalize()
    df["hour"] = started.hour
    df["dow"] = started.day_name()
    df["is_rush"] = df["hour"].isin(RUSH_HOURS)
    return df
