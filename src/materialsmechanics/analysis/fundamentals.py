"""
Stress & Strain Fundamentals
============================
Two independent demonstrations:

1. The Poisson effect: a bar stretched along its axis contracts sideways,
   eps_trans = -nu·eps_axial.
2. Engineering vs. true stress along an illustrative tensile curve. The curve
   shape is fixed and not fitted to any real material.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator
import logging

import numpy as np
import matplotlib.pyplot as plt

from materialsmechanics.analysis.curve_helpers import (
    curve_batch,
    engineering_stress_scalar,
    true_stress_scalar,
)
from materialsmechanics.config import CURVE_MAX_STRAIN, CURVE_STEP
from materialsmechanics.errors import (
    InvalidParameterError,
    require_finite,
    require_non_negative,
    require_poisson_ratio,
    require_positive,
)
from materialsmechanics.model.results import CurvePoint, FundamentalsResult, PoissonResult

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


def transverse_strain(axial_strain: float, poisson_ratio: float) -> float:
    """Lateral strain accompanying an axial strain."""
    axial_strain = require_finite("axial_strain", axial_strain)
    poisson_ratio = require_poisson_ratio("poisson_ratio", poisson_ratio)
    return -poisson_ratio * axial_strain


def poisson_deformation(
    axial_strain: float,
    poisson_ratio: float,
    width: float = 100.0,
    height: float = 100.0
) -> PoissonResult:
    """
    Deformed size of a block stretched along its height.

    Args:
        axial_strain: Strain along the loading (height) direction.
        poisson_ratio: Poisson ratio nu in [0, 0.5).
        width: Undeformed width, any length unit.
        height: Undeformed height, same unit as width.
    """
    width = require_positive("width", width)
    height = require_positive("height", height)
    eps_trans = transverse_strain(axial_strain, poisson_ratio)
    return PoissonResult(
        axial_strain=axial_strain,
        transverse_strain=eps_trans,
        width=width * (1.0 + eps_trans),
        height=height * (1.0 + axial_strain),
    )


def engineering_stress(strain: float) -> float:
    """Engineering stress (MPa) at an engineering strain >= 0."""
    return float(engineering_stress_scalar(require_non_negative("strain", strain)))


def true_stress(strain: float) -> float:
    """True stress (MPa) at an engineering strain >= 0."""
    return float(true_stress_scalar(require_non_negative("strain", strain)))


def curve_point(strain: float) -> CurvePoint:
    """Point query, used to mark the current strain on the curve."""
    sigma_eng = engineering_stress(strain)
    return CurvePoint(
        strain=float(strain),
        engineering_stress=sigma_eng,
        true_stress=sigma_eng * (1.0 + strain),
    )


class StressStrainCurve:
    """
    Sampled engineering/true stress curve over [0, max_strain].

    Iterating yields CurvePoint samples lazily. The sequence is finite and
    restartable: every ``iter()`` starts again from zero strain. Samples are
    placed at ``i * step`` (not by repeated addition), and the end point is
    included when ``max_strain`` is a multiple of ``step``.
    """
    NAME: str = "Engineering vs. True Stress"

    def __init__(self, max_strain: float = CURVE_MAX_STRAIN, step: float = CURVE_STEP):
        self.max_strain = require_positive("max_strain", max_strain)
        self.step = require_positive("step", step)
        if self.step > self.max_strain:
            raise InvalidParameterError("step", step, "must not exceed max_strain")
        # Guard against 0.5 / 0.01 = 49.99999...
        self._count = int(np.floor(self.max_strain / self.step + 1e-9)) + 1

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[CurvePoint]:
        for i in range(self._count):
            yield curve_point(i * self.step)

    def strains(self) -> npt.NDArray[np.float64]:
        return np.arange(self._count, dtype=np.float64) * self.step

    def as_arrays(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Return (strain, sigma_eng, sigma_true) arrays of all samples."""
        strains = self.strains()
        sigma_eng, sigma_true = curve_batch(strains)
        return strains, sigma_eng, sigma_true

    def plot(self, current_strain: float | None = None, show: bool = True) -> Figure:
        """
        Plot both curves, optionally marking the current strain.

        Args:
            current_strain: Strain to mark on both curves.
            show: Open the window; pass False to only build the figure.

        Returns:
            The matplotlib figure.
        """
        strains, sigma_eng, sigma_true = self.as_arrays()

        fig, ax = plt.subplots(figsize=(7, 5), layout="constrained")
        ax.plot(strains, sigma_eng, 'b', lw=2, label="Engineering stress")
        ax.plot(strains, sigma_true, 'r--', lw=2, label="True stress")

        if current_strain is not None:
            point = curve_point(current_strain)
            ax.plot([point.strain, point.strain], [point.engineering_stress, point.true_stress], 'ko')
            ax.axvline(point.strain, color='k', lw=0.8, ls=':')

        ax.grid(visible=True, which='major', linestyle='-', color='gray', lw=0.5)
        ax.minorticks_on()
        ax.grid(visible=True, which='minor', linestyle=':', color='gray', lw=0.5)

        ax.set_title(self.NAME)
        ax.set_xlabel("Engineering strain (-)")
        ax.set_ylabel("Stress (MPa)")
        ax.set_xlim(0.0, self.max_strain)
        ax.legend(loc="lower right")

        if show:
            plt.show()
        return fig


def fundamentals(strain_level: float, poisson_ratio: float) -> FundamentalsResult:
    """Poisson demonstration and curve point at the same strain level."""
    result = FundamentalsResult(
        poisson=poisson_deformation(strain_level, poisson_ratio),
        curve_point=curve_point(strain_level),
    )
    logger.debug(f"Fundamentals at e={strain_level:.3f}: eps_t={result.poisson.transverse_strain:.4g}, "
                 f"sigma_eng={result.curve_point.engineering_stress:.4g} MPa")
    return result


if __name__ == "__main__":
    StressStrainCurve().plot(current_strain=0.1)
