"""
Q-versus-frequency plot for a coil.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from ..geometry.base import CoilGeometry
from ..optimizer.closed_form import local_max_frequency, q_sweep
from ..utils.constants import DEFAULT_CONSTANTS, PhysicalConstants


class CoilPlotter:
    """Q(f) plots for a coil; the style applies only to figures made here."""

    RC_PARAMS = {
        'font.size': 11,
        'axes.grid': True,
        'grid.alpha': 0.3,
    }

    def __init__(self, style: str = "default", figsize: tuple = (10, 6)):
        """
        Args:
            style: Matplotlib style sheet for the Q(f) figure
            figsize: Figure size in inches
        """
        self.style = style
        self.figsize = figsize

    def _style_context(self):
        import matplotlib.pyplot as plt
        if self.style not in plt.style.available and self.style != "default":
            logger.warning(f"Unknown matplotlib style '{self.style}', using default")
            return plt.rc_context(self.RC_PARAMS)
        return plt.style.context([self.style, self.RC_PARAMS])

    def plot_q_vs_frequency(self, geometry: CoilGeometry,
                            resonant_frequency: Optional[float] = None,
                            span: float = 100.0,
                            n_freq: int = 401,
                            constants: PhysicalConstants = DEFAULT_CONSTANTS,
                            title: str = "Q vs Frequency",
                            save_path: str | None = None):
        """
        Plot Qeff on a log frequency axis around the max-Q frequency.

        Args:
            geometry: Coil to evaluate
            resonant_frequency: Realized f0 [Hz] to mark, if known
            span: The sweep covers fmax/span .. fmax·span
            n_freq: Number of frequency points
            save_path: Save plot to file
        """
        import matplotlib.pyplot as plt

        f_max = local_max_frequency(geometry, constants)
        freqs, q = q_sweep(geometry, f_max / span, f_max * span, n_freq, constants)

        with self._style_context():
            fig, ax = plt.subplots(figsize=self.figsize)
            ax.semilogx(freqs / 1e6, q, 'b-', linewidth=2, label='Q')
            ax.axvline(x=f_max / 1e6, color='r', linestyle='--', alpha=0.7,
                       label=f'Max-Q: {f_max / 1e6:.2f} MHz')
            if resonant_frequency:
                ax.axvline(x=resonant_frequency / 1e6, color='green', linestyle=':',
                           label=f'f0: {resonant_frequency / 1e6:.2f} MHz')

            ax.set_xlabel('Frequency (MHz)')
            ax.set_ylabel('Q')
            ax.set_title(title)
            ax.legend(loc='best')

            fig.tight_layout()
            if save_path:
                fig.savefig(save_path, dpi=150, bbox_inches='tight')
        return fig
