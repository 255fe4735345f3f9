"""
Tests for plotting functions (non-interactive backend)
"""

import pytest

from gmmlib.gsim import GmmInput, plot_distance, plot_spectrum


@pytest.fixture
def gmm_inputs():
	return [GmmInput.create(Mw=Mw, vs30=760.) for Mw in (6., 7.)]


def test_plot_distance(registry, gmm_inputs, tmp_path):
	fig_filespec = tmp_path / "distance.png"
	plot_distance(["AB_10", "ZHAO_06_CRUSTAL"], "PGA", gmm_inputs, epsilon=1,
				registry=registry, fig_filespec=str(fig_filespec))
	assert fig_filespec.exists()


def test_plot_spectrum(registry, gmm_inputs, tmp_path):
	fig_filespec = tmp_path / "spectrum.png"
	plot_spectrum(["AB_10", "CAMPBELL_03"], gmm_inputs, plot_freq=True,
				plot_style="loglin", registry=registry,
				fig_filespec=str(fig_filespec), title="Spectra")
	assert fig_filespec.exists()


def test_unknown_plot_style(registry, gmm_inputs):
	with pytest.raises(ValueError):
		plot_distance(["AB_10"], "PGA", gmm_inputs, plot_style="polar",
					registry=registry)
