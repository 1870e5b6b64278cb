import json
import logging
import re
from dataclasses import dataclass, asdict, fields

from .constants import BAIT_KEYS, NRG_KEYS, DEFAULT_BAIT, DEFAULT_NRG, TYPICAL_RANGES
from .errors import ValidationError

_LOGGER = logging.getLogger(__name__)


def _missing_keys(data, required):
    return [k for k in required if k not in data]


def _as_floats(data, keys, label):
    values = {}
    for k in keys:
        try:
            values[k] = float(data[k])
        except (TypeError, ValueError):
            raise ValidationError(f"{label} field '{k}' must be numeric, got {data[k]!r}") from None
    return values


@dataclass(frozen=True)
class BaitParameters:
    """
    Building characteristics that turn weather into the BAIT index.

    smoothing: weight of yesterday's index (thermal inertia), 0 <= x < 1
    solar:     C per W/m2 of irradiance above the setpoint (window size)
    wind:      C per m/s of wind above the setpoint (air tightness, negative)
    humidity:  C per g/kg of humidity above the setpoint (discomfort)
    """
    smoothing: float
    solar: float
    wind: float
    humidity: float

    @classmethod
    def from_dict(cls, data):
        missing = _missing_keys(data, BAIT_KEYS)
        if missing:
            raise ValidationError(f"BAIT parameters missing required field(s): {', '.join(missing)}")
        return cls(**_as_floats(data, BAIT_KEYS, "BAIT parameters"))

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class EnergyParameters:
    """
    The \\_/ relationship between the temperature index and demand.

    t_heat / t_cool: thresholds (C) below / above which heating / cooling starts
    p_base: flat baseline demand (kW)
    p_heat / p_cool: kW per degree beyond the threshold; zero disables the channel
    """
    t_heat: float
    t_cool: float
    p_base: float
    p_heat: float
    p_cool: float

    @classmethod
    def from_dict(cls, data):
        missing = _missing_keys(data, NRG_KEYS)
        if missing:
            raise ValidationError(f"Energy parameters missing required field(s): {', '.join(missing)}")
        return cls(**_as_floats(data, NRG_KEYS, "Energy parameters"))

    def to_dict(self):
        return asdict(self)


def coerce_parameters(params, cls):
    """Accept a parameter dataclass, a mapping, or any object with the right attributes."""
    if isinstance(params, cls):
        return params
    if params is None:
        raise ValidationError(f"{cls.__name__} is required")
    if not hasattr(params, 'keys'):
        # e.g. SimpleNamespace or a differently-typed dataclass
        names = [f.name for f in fields(cls)]
        params = {n: getattr(params, n) for n in names if hasattr(params, n)}
    return cls.from_dict(params)


def check_typical_ranges(params):
    """
    Log a warning for every parameter outside its typical range.
    Returns the names of the out-of-range parameters. Never raises.
    """
    values = params.to_dict() if hasattr(params, 'to_dict') else dict(params)
    flagged = []
    for name, (low, high) in TYPICAL_RANGES.items():
        if name not in values:
            continue
        if not low <= values[name] <= high:
            _LOGGER.warning(f"Parameter '{name}'={values[name]} is outside its typical range [{low}, {high}]")
            flagged.append(name)

    if 't_heat' in values and 't_cool' in values and values['t_heat'] > values['t_cool']:
        _LOGGER.warning(f"t_heat ({values['t_heat']}) is above t_cool ({values['t_cool']}): "
                        "heating and cooling will overlap")
        flagged.append('t_heat>t_cool')
    return flagged


def load_parameters(filepath, cls, use_defaults=False):
    """
    Load BaitParameters or EnergyParameters from a JSON file.
    Supports C-style // comments so users can annotate their files.
    With use_defaults, keys missing from the file are taken from the model defaults.
    """
    with open(filepath, 'r') as f:
        content = re.sub(r'//.*', '', f.read())
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Parameter file '{filepath}' is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValidationError(f"Parameter file '{filepath}' must contain a JSON object")

    # Combined files (as written by main.py --save-params) nest each set
    section = 'bait' if cls is BaitParameters else 'nrg'
    if isinstance(data.get(section), dict):
        data = data[section]

    if use_defaults:
        defaults = DEFAULT_BAIT if cls is BaitParameters else DEFAULT_NRG
        data = {**defaults, **data}
    return cls.from_dict(data)


def default_bait():
    return BaitParameters.from_dict(DEFAULT_BAIT)


def default_nrg():
    return EnergyParameters.from_dict(DEFAULT_NRG)
