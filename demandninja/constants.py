"""
Model constants and parameter defaults.
The setpoint and blend constants are part of the model definition and are not
exposed as tunable parameters.
"""

# Column / key contracts
WEATHER_COLUMNS = ['time', 'T', 'S', 'W', 'H']
BAIT_KEYS = ['smoothing', 'solar', 'wind', 'humidity']
NRG_KEYS = ['t_heat', 't_cool', 'p_base', 'p_heat', 'p_cool']
PROFILE_COLUMNS = ['hour', 'heating', 'cooling']
DEMAND_COLUMNS = ['heating_demand', 'cooling_demand', 'total_demand']
RAW_COLUMNS = ['T', 'S', 'W', 'H', 'BAIT', 'HDD', 'CDD']
HOURS_PER_DAY = 24

# Setpoints: the 'average' weather for a given temperature
SETPOINT_S_BASE = 100.0     # W/m2
SETPOINT_S_SLOPE = 7.0      # W/m2 per C
SETPOINT_W_BASE = 4.5       # m/s
SETPOINT_W_SLOPE = -0.025   # m/s per C
SETPOINT_H_BASE = 1.1       # exp(1.1 + 0.06 T) g/kg
SETPOINT_H_SLOPE = 0.06
SETPOINT_T = 16.0           # C, around which discomfort is measured

# Blending raw temperature into BAIT (occupants opening windows etc.)
LOWER_BLEND = 15.0          # C at which blending starts
UPPER_BLEND = 23.0          # C at which blending is complete
MAX_RAW_VAR = 0.5           # max share of raw T in the final index
BLEND_SIGMOID_SPAN = 10.0   # lower/upper map onto -5/+5

# Number of previous days that feed the smoother
SMOOTHING_DAYS = 2

# Interpolation anchor: daily values represent local noon
ANCHOR_HOURS = 12

# Defaults (typical UK house with electric heating and air conditioning)
DEFAULT_BAIT = {
    'smoothing': 0.50,  # days^-1
    'solar': 0.012,     # C per W/m2
    'wind': -0.20,      # C per m/s
    'humidity': 0.05,   # C per g/kg
}

DEFAULT_NRG = {
    't_heat': 14.0,     # C
    't_cool': 19.5,     # C
    'p_base': 0.325,    # kW
    'p_heat': 0.125,    # kW/C
    'p_cool': 0.25,     # kW/C
}

# Typical ranges (2 stdev across household datasets); outside is legal but suspicious
TYPICAL_RANGES = {
    'smoothing': (0.20, 0.80),
    'solar': (0.004, 0.020),
    'wind': (-0.35, -0.05),
    'humidity': (0.00, 0.10),
    't_heat': (11.0, 17.0),
    't_cool': (17.0, 23.0),
}
