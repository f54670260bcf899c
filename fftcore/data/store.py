"""Transform and benchmark results data saving module."""

from pathlib import Path

import numpy as np
from h5py import File

from .paths import get_base_dir


class OutputManager:
    """Handles transform and benchmark data storage."""

    def __init__(self, save_path=None, compression="gzip", compression_opts=9):
        """Initialize output manager.

        Parameters
        ----------
        save_path : str
            Directory where data files will be stored.
        compression : str, default: "gzip"
            Compression method for HDF5 files.
        compression_opts : integer, default: 9
            Compression level chosen.

        """
        self.save_path = Path(save_path) if save_path else get_base_dir()
        self.save_path.mkdir(parents=True, exist_ok=True)
        self.compression = compression
        self.compression_opts = compression_opts

        self.spectrum_path = self.save_path / "fftcore_spectrum.h5"
        self.benchmark_path = self.save_path / "fftcore_benchmark.h5"

    def _dataset(self, group, name, data):
        group.create_dataset(
            name,
            data=data,
            compression=self.compression,
            compression_opts=self.compression_opts,
            chunks=True,
            shuffle=True,
        )

    def save_spectrum(self, signal, spectrum, plan, backend="native"):
        """Save an input buffer and its transform to HDF5 file.

        Parameters
        ----------
        signal : (N,) array_like
            Samples before the transform.
        spectrum : (N,) array_like
            Samples after the transform.
        plan : Plan
            Plan used for the transform.
        backend : str, default: "native"
            Backend that produced `spectrum`.

        """
        with File(self.spectrum_path, "w") as f:
            self._dataset(f, "signal", np.asarray(signal, dtype=np.complex128))
            self._dataset(f, "spectrum", np.asarray(spectrum, dtype=np.complex128))

            meta = f.create_group("metadata")
            meta.attrs["length"] = plan.length
            meta.attrs["direction"] = plan.direction.name.lower()
            meta.attrs["algorithm"] = plan.algorithm
            meta.attrs["backend"] = backend

        return self.spectrum_path

    def save_benchmark(self, records):
        """Save benchmark timings to HDF5 file.

        Parameters
        ----------
        records : list of BenchmarkRecord
            One record per (group, case, size) measurement.

        """
        groups = {}
        for record in records:
            groups.setdefault(record.group, {}).setdefault(record.case, []).append(
                record
            )

        with File(self.benchmark_path, "w") as f:
            for group_name, cases in groups.items():
                group = f.create_group(group_name)
                for case_name, case_records in cases.items():
                    case = group.create_group(case_name)
                    case.create_dataset(
                        "size", data=np.array([r.size for r in case_records])
                    )
                    case.create_dataset(
                        "mean_s", data=np.array([r.mean for r in case_records])
                    )
                    case.create_dataset(
                        "best_s", data=np.array([r.best for r in case_records])
                    )
                    case.create_dataset(
                        "std_s", data=np.array([r.std for r in case_records])
                    )
                    case.attrs["repeats"] = case_records[0].repeats

        return self.benchmark_path


def load_spectrum(file_path):
    """Load a saved transform from HDF5 file."""
    with File(file_path, "r") as f:
        data = {
            "signal": f["signal"][()],
            "spectrum": f["spectrum"][()],
        }
        data.update({k: v for k, v in f["metadata"].attrs.items()})
    for key in ("direction", "algorithm", "backend"):
        if isinstance(data.get(key), bytes):
            data[key] = data[key].decode()
    data["length"] = int(data["length"])
    return data


def load_benchmark(file_path):
    """Load benchmark timings as {group: {case: {field: array}}}."""
    data = {}
    with File(file_path, "r") as f:
        for group_name, group in f.items():
            data[group_name] = {}
            for case_name, case in group.items():
                data[group_name][case_name] = {
                    "size": case["size"][()],
                    "mean_s": case["mean_s"][()],
                    "best_s": case["best_s"][()],
                    "std_s": case["std_s"][()],
                    "repeats": int(case.attrs["repeats"]),
                }
    return data
