"""Helper module for FFT shared instance and method exposure."""
from .fft_manager import FFTManager

fft_manager = FFTManager()
fft_manager.set_fft_backend("native", verbose=False)

def compute_fft(data, pad=False):
    """Exposed method for using the FFT."""
    return fft_manager.fft(data, pad=pad)

def compute_ifft(data, pad=False):
    """Exposed method for using the IFFT."""
    return fft_manager.ifft(data, pad=pad)
