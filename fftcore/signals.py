"""Synthetic complex test signals."""

import numpy as np


def generate_sine_wave(frequency, samples, amplitude=1.0, phase=0.0):
    """
    Real sine wave of `frequency` cycles per buffer.

    Parameters
    ----------
    frequency : float
        Number of periods inside the buffer.
    samples : integer
        Buffer length.
    amplitude : float, default: 1.0
        Peak amplitude.
    phase : float, default: 0.0
        Initial phase [rad].

    Returns
    -------
    out : (samples,) ndarray
        Complex samples with zero imaginary part.

    """
    t_grid = np.arange(samples, dtype=np.float64) / samples
    wave = amplitude * np.sin(2 * np.pi * frequency * t_grid + phase)
    return wave.astype(np.complex128)


def generate_multitone(frequencies, samples, amplitude=1.0):
    """Sum of real sine waves, one per entry of `frequencies`."""
    out = np.zeros(samples, dtype=np.complex128)
    for frequency in frequencies:
        out += generate_sine_wave(frequency, samples, amplitude=amplitude)
    return out


def generate_noise(samples, low=-1.0, high=1.0, seed=None, complex_noise=False):
    """Uniform white noise in [low, high), real unless `complex_noise`."""
    rng = np.random.default_rng(seed)
    out = rng.uniform(low, high, samples).astype(np.complex128)
    if complex_noise:
        out.imag = rng.uniform(low, high, samples)
    return out


def generate_dc(samples, value=1.0):
    """Constant signal."""
    return np.full(samples, value, dtype=np.complex128)


def generate_impulse(samples, position=0, value=1.0):
    """Single non-zero sample at `position`."""
    if not 0 <= position < samples:
        raise ValueError(f"Impulse position {position} outside [0, {samples}).")
    out = np.zeros(samples, dtype=np.complex128)
    out[position] = value
    return out


class Signal:
    """Synthetic signal chosen from the configuration."""

    def __init__(self, length, signal_name, signal_par):
        self.length = length
        self.name = signal_name
        self.par = signal_par

        self._generators = {
            "sine": self._init_sine,
            "multitone": self._init_multitone,
            "noise": self._init_noise,
            "dc": self._init_dc,
            "impulse": self._init_impulse,
        }
        if self.name not in self._generators:
            raise ValueError(f"Invalid signal type: '{self.name}'.")

    def _init_sine(self):
        return generate_sine_wave(
            self.par.frequency,
            self.length,
            amplitude=self.par.amplitude,
            phase=self.par.phase,
        )

    def _init_multitone(self):
        return generate_multitone(
            self.par.frequencies, self.length, amplitude=self.par.amplitude
        )

    def _init_noise(self):
        return generate_noise(
            self.length,
            low=self.par.low,
            high=self.par.high,
            seed=self.par.seed,
            complex_noise=self.par.complex_noise,
        )

    def _init_dc(self):
        return generate_dc(self.length, value=self.par.value)

    def _init_impulse(self):
        return generate_impulse(
            self.length, position=self.par.position, value=self.par.value
        )

    def generate(self):
        """Return a fresh complex128 buffer with the signal samples."""
        return self._generators[self.name]()
