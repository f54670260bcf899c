"""fftcore configuration file module."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Type

from .direction import Direction
from .functions.fft_manager import FFT_BACKENDS


@dataclass
class TransformConfig:
    length: int
    pad: Optional[bool] = False  # zero-pad to the next power of two

@dataclass
class SineSignalConfig:
    frequency: float = 1.0  # cycles per buffer
    amplitude: Optional[float] = 1.0
    phase: Optional[float] = 0.0  # [rad]

@dataclass
class MultiToneSignalConfig:
    frequencies: Tuple[float, ...] = (1.0, 10.0)  # cycles per buffer
    amplitude: Optional[float] = 1.0

@dataclass
class NoiseSignalConfig:
    low: Optional[float] = -1.0
    high: Optional[float] = 1.0
    seed: Optional[int] = None
    complex_noise: Optional[bool] = False

@dataclass
class DCSignalConfig:
    value: Optional[float] = 1.0

@dataclass
class ImpulseSignalConfig:
    position: Optional[int] = 0
    value: Optional[float] = 1.0

@dataclass
class BenchmarkConfig:
    sizes: Tuple[int, ...] = (8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096)
    signal_length: Optional[int] = 1024
    repeats: Optional[int] = 50
    warmup: Optional[int] = 2

TRANSFORM_CONFIG_CLASSES: Dict[str, Type] = {
    "forward": TransformConfig,
    "inverse": TransformConfig,
}

SIGNAL_CONFIG_CLASSES: Dict[str, Type] = {
    "sine": SineSignalConfig,
    "multitone": MultiToneSignalConfig,
    "noise": NoiseSignalConfig,
    "dc": DCSignalConfig,
    "impulse": ImpulseSignalConfig,
}

def _lowercase_dict(d: Dict) -> Dict:
    new_dict = {}
    for k, v in d.items():
        lower_key = k.lower()
        if isinstance(v, dict):
            new_dict[lower_key] = _lowercase_dict(v)
        else:
            new_dict[lower_key] = v
    return new_dict

@dataclass
class ConfigOptions:
    """
    This class provides the dataclass key-var pairs
    needed for running a transform. Each key corresponds
    to a specific option.

    The available options are

    Parameters                          Choice
    =============================       ======================================
     direction : Direction              "forward" | "inverse"
     transform_par : object             see "classes" above for the list
     signal_name : str                  "sine" | "multitone" | "noise" |
                                        "dc" | "impulse"
     signal_par : object                see "classes" above for the list
     benchmark_par : object             see "classes" above for the list
     computing_backend : str            "native" | "scipy"
    =============================       ======================================

    """
    direction: Direction
    transform_par: object
    signal_name: str
    signal_par: object
    benchmark_par: object
    computing_backend: str

    @staticmethod
    def build(
        transform_parameters: Dict[str, Dict],
        signal_parameters: Dict[str, Dict],
        computing_backend: str = "native",
        benchmark_parameters: Optional[Dict] = None,
    ) -> "ConfigOptions":

        transform_parameters = _lowercase_dict(transform_parameters)
        signal_parameters = _lowercase_dict(signal_parameters)
        benchmark_parameters = _lowercase_dict(benchmark_parameters or {})

        direction_name = next(iter(transform_parameters)).lower()
        transform_params = transform_parameters[direction_name]

        if direction_name not in TRANSFORM_CONFIG_CLASSES:
            raise ValueError(f"Invalid transform direction: '{direction_name}'.")

        transform_class = TRANSFORM_CONFIG_CLASSES[direction_name]
        transform_config = transform_class(**transform_params)

        signal_name = next(iter(signal_parameters)).lower()
        signal_params = signal_parameters[signal_name]

        if signal_name not in SIGNAL_CONFIG_CLASSES:
            raise ValueError(f"Invalid signal type: {signal_name}.")

        signal_class = SIGNAL_CONFIG_CLASSES[signal_name]
        signal_config = signal_class(**signal_params)

        benchmark_config = BenchmarkConfig(**benchmark_parameters)

        if computing_backend.lower() not in FFT_BACKENDS:
            raise ValueError(f"Invalid computing backend: {computing_backend}.")

        return ConfigOptions(
            direction=Direction.parse(direction_name),
            transform_par=transform_config,
            signal_name=signal_name,
            signal_par=signal_config,
            benchmark_par=benchmark_config,
            computing_backend=computing_backend.lower(),
        )
