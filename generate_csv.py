#!/usr/bin/python3

import pandas as pd
import numpy as np

# --- CONFIGURATION ---
# 14 days of hourly data, starting in early spring
timestamps = pd.date_range(start="2025-03-01 00:00", periods=14 * 24, freq="h")
rng = np.random.default_rng(42)

hours = timestamps.hour.to_numpy()
days = np.arange(len(timestamps)) / 24.0

# 1. Temperature: daily cycle (min 6am, max 3pm) on top of a warming trend
t = 8 + 0.6 * days - 4 * np.cos((hours - 3) * np.pi / 12) + rng.normal(0, 0.5, len(timestamps))

# 2. Solar: bell curve between 7am and 7pm, cloudier on some days
cloud = np.repeat(rng.uniform(0.3, 1.0, 14), 24)
s = np.where((hours > 7) & (hours < 19), 600 * np.sin((hours - 7) * np.pi / 12), 0.0) * cloud
s = np.maximum(0, s)

# 3. Wind: gusty around a mean of 4.5 m/s
w = np.maximum(0, 4.5 + rng.normal(0, 1.5, len(timestamps)))

# 4. Specific humidity: near the typical value for the temperature
h = np.exp(1.1 + 0.06 * t) * rng.uniform(0.85, 1.15, len(timestamps))

# --- EXPORT TO CSV (renewables.ninja layout) ---
df = pd.DataFrame({
    'time': timestamps.strftime("%Y-%m-%d %H:%M"),
    'local_time': timestamps.strftime("%Y-%m-%d %H:%M"),
    't2m': np.round(t, 3),
    'swgdn': np.round(s, 3),
    'wind_speed': np.round(w, 3),
    'qv': np.round(h, 3),
})

filename = "test_weather.csv"
with open(filename, 'w') as f:
    f.write("# Synthetic weather (hourly data)\n")
    f.write("# Units: time in UTC, t2m in C, swgdn in W/m2, wind_speed in m/s, qv in g/kg\n")
    f.write("# Generated by generate_csv.py\n")
    df.to_csv(f, index=False)

print(f"Successfully generated {filename} with {len(df)} rows.")
print("You can now run: python main.py test_weather.csv --plot")
