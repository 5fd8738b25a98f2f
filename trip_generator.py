import numpy as np
import pandas as pd

# A few NYC-ish station names (fake but plausible)
STATIONS = [
    "W 33 St & 7 Ave", "E 17 St & Broadway", "Union Sq E & E 16 St",
    "Broadway & W 60 St", "Bedford Ave & N 7 St", "Fulton St & Broadway",
    "W 4 St & 7 Ave S", "Grand St & Greene St", "E 72 St & Park Ave",
    "Vesey Pl & River Terrace",
]

START_DATE = "2026-01-12"   # a Monday
N_DAYS     = 7

# Morning peak 8-9, evening peak 17-18, plus some baseline
HOUR_WEIGHTS = {8: 4, 9: 3, 17: 4, 18: 3, 12: 1, 13: 1, 14: 1, 20: 1, 21: 1}
RUSH_HOURS   = frozenset({8, 9, 17, 18})

P_DIFFERENT_END = 0.85

# (low, high) in minutes, sampled on a 0.5 grid
WEEKDAY_RUSH_RANGE  = (6.0, 18.0)
WEEKDAY_OTHER_RANGE = (5.0, 25.0)
WEEKEND_RANGE       = (8.0, 35.0)
DURATION_STEP       = 0.5


class InvalidTripCount(ValueError):
    """Raised when the generator is asked for something it cannot produce."""


def _check_inputs(n, n_days, hour_weights):
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidTripCount(f"trip count must be an integer, got {n!r}")
    if n < 1:
        raise InvalidTripCount(f"trip count must be >= 1, got {n}")
    if n_days < 1:
        raise InvalidTripCount(f"n_days must be >= 1, got {n_days}")
    if not hour_weights:
        raise InvalidTripCount("hour_weights is empty")
    for h, w in hour_weights.items():
        if isinstance(h, bool) or not isinstance(h, (int, np.integer)):
            raise InvalidTripCount(f"hour must be an integer, got {h!r}")
        if not 0 <= h <= 23:
            raise InvalidTripCount(f"hour {h} is outside 0-23")
        if w <= 0:
            raise InvalidTripCount(f"weight for hour {h} must be positive, got {w}")


def _grid_size(bounds):
    low, high = bounds
    return int(round((high - low) / DURATION_STEP)) + 1


def sample_durations(rng, weekday, rush):
    """Draw one duration per trip from the grid matching its day type and hour."""
    low  = np.where(weekday,
                    np.where(rush, WEEKDAY_RUSH_RANGE[0], WEEKDAY_OTHER_RANGE[0]),
                    WEEKEND_RANGE[0])
    size = np.where(weekday,
                    np.where(rush, _grid_size(WEEKDAY_RUSH_RANGE), _grid_size(WEEKDAY_OTHER_RANGE)),
                    _grid_size(WEEKEND_RANGE))
    steps = rng.integers(0, size)
    return low + DURATION_STEP * steps


def make_trips(n, seed=7, start_date=START_DATE, n_days=N_DAYS, hour_weights=None):
    """Synthetic "Citi Bike-ish" trips with rush-hour-biased start times.

    Returns a DataFrame with columns trip_id, start_station, end_station,
    started_at and duration_min. The same (n, seed) always gives the same frame.
    """
    if hour_weights is None:
        hour_weights = HOUR_WEIGHTS
    _check_inputs(n, n_days, hour_weights)

    rng = np.random.default_rng(seed)

    # 1) Day and time of day
    days = pd.date_range(start_date, periods=n_days, freq="D")
    day = days.values[rng.integers(0, n_days, size=n)]

    hours   = np.array(sorted(hour_weights))
    weights = np.array([hour_weights[h] for h in hours], dtype=float)
    hour = rng.choice(hours, size=n, p=weights / weights.sum())
    minute = rng.integers(0, 60, size=n)
    second = rng.integers(0, 60, size=n)

    started_at = (
        pd.DatetimeIndex(day)
        + pd.to_timedelta(hour, unit="h")
        + pd.to_timedelta(minute, unit="m")
        + pd.to_timedelta(second, unit="s")
    )

    # 2) Stations: end is usually a different station, picked uniformly among the rest
    n_stations = len(STATIONS)
    start_idx = rng.integers(0, n_stations, size=n)
    offset = rng.integers(1, n_stations, size=n)
    moves = rng.random(size=n) < P_DIFFERENT_END
    end_idx = np.where(moves, (start_idx + offset) % n_stations, start_idx)

    # 3) Durations: commute-ish in weekday rush hours, longer on weekends
    weekday = pd.DatetimeIndex(day).dayofweek < 5
    rush = np.isin(hour, list(RUSH_HOURS))
    duration_min = sample_durations(rng, np.asarray(weekday), rush)

    names = np.array(STATIONS, dtype=object)
    return pd.DataFrame({
        "trip_id": np.arange(1, n + 1, dtype=np.int64),
        "start_station": names[start_idx],
        "end_station": names[end_idx],
        "started_at": started_at,
        "duration_min": duration_min.astype(float),
    })
