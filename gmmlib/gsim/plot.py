"""
Ground-motion model plotting functions
"""

import numpy as np
from matplotlib import pyplot
from matplotlib.font_manager import FontProperties

from ..imt import Imt
from .registry import get_registry
from .spectrum import calc_spectrum



__all__ = ['plot_distance', 'plot_spectrum']


IMT_UNITS = {Imt.PGV: "cm/s", Imt.PGD: "cm"}

DISTANCE_LABELS = {
	"rRup": "Rupture distance (km)",
	"rJB": "Joyner-Boore distance (km)",
	None: "Distance (km)"}


def _get_plotfunc(plot_style):
	plot_style = plot_style.lower()
	if plot_style in ("lin", "linlin"):
		return pyplot.plot
	elif plot_style == "linlog":
		return pyplot.semilogy
	elif plot_style == "loglin":
		return pyplot.semilogx
	elif plot_style == "loglog":
		return pyplot.loglog
	raise ValueError("Unknown plot style: %s" % plot_style)


def _finish(fig_filespec, title, legend_location, want_minor_grid):
	pyplot.grid(True)
	if want_minor_grid:
		pyplot.grid(True, which="minor")
	pyplot.title(title)
	font = FontProperties(size='medium')
	pyplot.legend(loc=legend_location, prop=font)
	if fig_filespec:
		pyplot.savefig(fig_filespec, dpi=300)
		pyplot.clf()
	else:
		pyplot.show()


def plot_distance(model_ids, imt, gmm_inputs, dmin=1., dmax=300., num_distances=25,
				epsilon=0, plot_style="loglog", colors=None, registry=None,
				fig_filespec=None, title=None, want_minor_grid=False,
				legend_location=0):
	"""
	Plot median ground motion versus distance for one or more models.
	All distance measures (rJB, rRup, rX) of the inputs are replaced
	by the plotted distance.

	:param model_ids:
		list of str, model identifiers
	:param imt:
		instance of :class:`Imt` or str understood by :meth:`Imt.parse`
	:param gmm_inputs:
		list of instances of :class:`GmmInput`, one line per input
		(typically differing in magnitude)
	:param dmin:
		float, minimum distance in km
		(default: 1.)
	:param dmax:
		float, maximum distance in km
		(default: 300.)
	:param num_distances:
		int, number of logarithmically spaced distances
		(default: 25)
	:param epsilon:
		float, number of standard deviations above and below the median
		to plot in addition to the median
		(default: 0)
	:param plot_style:
		str, plotting style ("lin", "loglin", "linlog" or "loglog").
		First term refers to horizontal axis, second term to vertical axis.
		(default: "loglog")
	:param colors:
		list of matplotlib color specifications
		(default: None)
	:param registry:
		instance of :class:`ModelRegistry`
		(default: None, use default registry)
	:param fig_filespec:
		str, full path specification of output file
		(default: None, show plot on screen)
	:param title:
		str, plot title
		(default: None, use IMT)
	:param want_minor_grid:
		bool, whether or not to plot minor gridlines
		(default: False)
	:param legend_location:
		int or str, matplotlib legend location
		(default: 0)
	"""
	imt = Imt.parse(imt)
	registry = registry or get_registry()
	linestyles = ("-", "--", ":", "-.")
	if not colors:
		colors = ("k", "r", "g", "b", "c", "m", "y")
	plotfunc = _get_plotfunc(plot_style)

	distances = np.logspace(np.log10(dmin), np.log10(dmax), num_distances)
	distance_metrics = set()
	for i, model_id in enumerate(model_ids):
		model = registry.instance(model_id, imt)
		distance_metrics.add(model.DISTANCE_METRIC)
		for j, gmm_input in enumerate(gmm_inputs):
			gms = [model.calc(gmm_input._replace(rJB=d, rRup=d, rX=d))
					for d in distances]
			means = np.array([gm.mean for gm in gms])
			sigmas = np.array([gm.sigma for gm in gms])
			color = colors[i % len(colors)]
			linestyle = linestyles[j % len(linestyles)]
			label = "%s (M=%.1f)" % (model.NAME, gmm_input.Mw)
			plotfunc(distances, np.exp(means), color=color, linestyle=linestyle,
					linewidth=3, label=label)
			if epsilon:
				plotfunc(distances, np.exp(means + epsilon * sigmas), color=color,
						linestyle=linestyle, linewidth=1,
						label=label + r" $\pm %s \sigma$" % epsilon)
				plotfunc(distances, np.exp(means - epsilon * sigmas), color=color,
						linestyle=linestyle, linewidth=1, label='_nolegend_')

	if len(distance_metrics) == 1:
		pyplot.xlabel(DISTANCE_LABELS[distance_metrics.pop()], fontsize="x-large")
	else:
		pyplot.xlabel(DISTANCE_LABELS[None], fontsize="x-large")
	pyplot.ylabel("%s (%s)" % (imt, IMT_UNITS.get(imt, "g")), fontsize="x-large")
	if title is None:
		title = str(imt)
	_finish(fig_filespec, title, legend_location, want_minor_grid)


def plot_spectrum(model_ids, gmm_inputs, epsilon=0, include_pga=True,
				plot_freq=False, plot_style="loglog", colors=None, registry=None,
				fig_filespec=None, title="", want_minor_grid=False,
				legend_location=0):
	"""
	Plot median response spectrum for one or more models

	:param model_ids:
		list of str, model identifiers
	:param gmm_inputs:
		list of instances of :class:`GmmInput`, one line per input
	:param epsilon:
		float, number of standard deviations above and below the median
		to plot in addition to the median
		(default: 0)
	:param include_pga:
		bool, whether or not to plot PGA (at 0.01 s, or 100 Hz), if
		supported by the model
		(default: True)
	:param plot_freq:
		bool, whether or not to plot frequencies instead of periods
		(default: False)
	:param plot_style:
		str, see :func:`plot_distance`
		(default: "loglog")
	:param colors:
		list of matplotlib color specifications
		(default: None)
	:param registry:
		instance of :class:`ModelRegistry`
		(default: None, use default registry)
	:param fig_filespec:
		str, full path specification of output file
		(default: None, show plot on screen)
	:param title:
		str, plot title
		(default: "")
	:param want_minor_grid:
		bool, whether or not to plot minor gridlines
		(default: False)
	:param legend_location:
		int or str, matplotlib legend location
		(default: 0)
	"""
	registry = registry or get_registry()
	linestyles = ("-", "--", ":", "-.")
	if not colors:
		colors = ("k", "r", "g", "b", "c", "m", "y")
	plotfunc = _get_plotfunc(plot_style)

	for i, model_id in enumerate(model_ids):
		model_class = registry.model_class(model_id)
		for j, gmm_input in enumerate(gmm_inputs):
			spectrum = calc_spectrum(model_id, gmm_input, registry=registry)
			periods = [imt.period for imt, _ in spectrum]
			means = np.array([gm.mean for _, gm in spectrum])
			sigmas = np.array([gm.sigma for _, gm in spectrum])
			if include_pga and Imt.PGA in model_class.supported_imts():
				pga = registry.instance(model_id, Imt.PGA).calc(gmm_input)
				periods.insert(0, 0.01)
				means = np.concatenate([[pga.mean], means])
				sigmas = np.concatenate([[pga.sigma], sigmas])
			x = np.array(periods)
			if plot_freq:
				x = 1. / x
			color = colors[i % len(colors)]
			linestyle = linestyles[j % len(linestyles)]
			label = "%s (M=%.1f)" % (model_class.NAME, gmm_input.Mw)
			plotfunc(x, np.exp(means), color=color, linestyle=linestyle,
					linewidth=3, label=label)
			if epsilon:
				plotfunc(x, np.exp(means + epsilon * sigmas), color=color,
						linestyle=linestyle, linewidth=1,
						label=label + r" $\pm %s \sigma$" % epsilon)
				plotfunc(x, np.exp(means - epsilon * sigmas), color=color,
						linestyle=linestyle, linewidth=1, label='_nolegend_')

	if plot_freq:
		pyplot.xlabel("Frequency (Hz)", fontsize="x-large")
	else:
		pyplot.xlabel("Period (s)", fontsize="x-large")
	pyplot.ylabel("SA (g)", fontsize="x-large")
	_finish(fig_filespec, title, legend_location, want_minor_grid)
