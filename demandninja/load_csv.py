import pandas as pd

from .constants import WEATHER_COLUMNS
from .errors import ConfigurationError

# renewables.ninja downloads start with three lines of metadata
NINJA_HEADER_LINES = 3


def read_ninja_weather(filepath: str, use_local_time: bool = False) -> pd.DataFrame:
    """
    Read a weather CSV downloaded from renewables.ninja.

    Expects the four variables air temperature, ground-level horizontal solar
    irradiance, wind speed and specific humidity (in that order) after the
    time and local_time columns. They are renamed to T, S, W, H.

    Args:
        filepath: Path to the CSV file.
        use_local_time: Use the wall-clock part of 'local_time' for timestamps
            instead of UTC 'time'. Daylight-saving changes then produce
            repeated or missing hours, which the model rejects.

    Returns:
        DataFrame with columns time, T, S, W, H.
    """
    print(f"Loading weather from {filepath}...")

    try:
        df = pd.read_csv(filepath, skiprows=NINJA_HEADER_LINES)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise ConfigurationError(f"Could not read weather from {filepath}: {e}") from e

    if use_local_time:
        if 'local_time' not in df.columns:
            raise ConfigurationError("use_local_time requested but the file has no 'local_time' column")
        print("Using 'local_time' column for timestamps.")
        # Keep 'YYYY-MM-DD HH:MM', dropping any UTC offset suffix
        df['time'] = df['local_time'].astype(str).str.slice(0, 16)

    if 'local_time' in df.columns:
        df = df.drop(columns=['local_time'])

    if len(df.columns) != len(WEATHER_COLUMNS):
        raise ConfigurationError(
            f"Expected {len(WEATHER_COLUMNS)} columns (time + 4 weather variables) in {filepath}, "
            f"got {len(df.columns)}: {list(df.columns)}")

    # Rename positionally; long variable names differ between downloads
    df.columns = WEATHER_COLUMNS
    df['time'] = pd.to_datetime(df['time'])
    if df['time'].dt.tz is not None:
        df['time'] = df['time'].dt.tz_localize(None)

    print(f"Successfully loaded {len(df)} rows.")
    return df
