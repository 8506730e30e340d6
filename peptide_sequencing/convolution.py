import numpy as np

from peptide_sequencing.spectra import MIN_RESIDUE_MASS, MAX_RESIDUE_MASS, is_positive_integer


class SpectralConvolution:
    def __init__(self, m):
        if not is_positive_integer(m):
            raise ValueError("The alphabet size M must be a positive integer.")
        self.m = m

    def convolution(self, spectrum):
        values = np.asarray(spectrum, dtype=np.int64)
        i, j = np.triu_indices(len(values), k=1)
        diffs = np.abs(values[j] - values[i])
        return diffs[diffs != 0].tolist()

    def frequencies(self, convolution):
        masses, counts = np.unique(np.asarray(convolution, dtype=np.int64), return_counts=True)
        window = (masses >= MIN_RESIDUE_MASS) & (masses <= MAX_RESIDUE_MASS)
        return dict(zip(masses[window].tolist(), counts[window].tolist()))

    def ranked(self, convolution):
        counts = self.frequencies(convolution)
        return sorted(counts.items(), key=lambda x: (-x[1], x[0]))

    def restrict(self, convolution, m=None):
        m = self.m if m is None else m
        if not is_positive_integer(m):
            raise ValueError("The alphabet size M must be a positive integer.")
        ranked = self.ranked(convolution)
        if len(ranked) <= m:
            return [mass for mass, _ in ranked]
        cutoff = ranked[m - 1][1]
        return [mass for mass, count in ranked if count >= cutoff]

    def run(self, spectrum):
        return self.restrict(self.convolution(spectrum))
