import numbers
import re

INTEGER_MASSES = [
    57, 71, 87, 97, 99, 101, 103, 113, 114,
    115, 128, 129, 131, 137, 147, 156, 163, 186
]

MIN_RESIDUE_MASS = 57
MAX_RESIDUE_MASS = 200


def is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_positive_integer(value):
    return is_integer(value) and value > 0


def mass(peptide):
    return sum(peptide)


def parent_mass(spectrum):
    return spectrum[-1]


def parse_spectrum(text):
    tokens = [t for t in re.split(r"[\s,]+", text.strip()) if t]
    spectrum = []
    for token in tokens:
        try:
            spectrum.append(int(token))
        except ValueError:
            raise ValueError(f"Spectrum value '{token}' is not an integer mass.")
    return sorted(spectrum)


def validate_spectrum(spectrum):
    if len(spectrum) == 0:
        raise ValueError("The spectrum is empty.")
    if not all(is_integer(value) for value in spectrum):
        raise ValueError("The spectrum contains non-integer masses.")
    if any(value < 0 for value in spectrum):
        raise ValueError("The spectrum contains negative masses.")
    if any(spectrum[i] > spectrum[i + 1] for i in range(len(spectrum) - 1)):
        raise ValueError("The spectrum is not sorted in ascending order.")


def shared_mass_count(theoretical, experimental):
    theoretical = sorted(theoretical)
    experimental = sorted(experimental)
    score, i, j = 1, 0, 0
    while i < len(theoretical) and j < len(experimental):
        if theoretical[i] == experimental[j]:
            score += 1
            i += 1
            j += 1
        elif theoretical[i] < experimental[j]:
            i += 1
        else:
            j += 1
    return score


class TheoreticalSpectra:
    def cyclic_spectrum(self, peptide):
        n = len(peptide)
        spectrum = []
        for start in range(n):
            sub_mass = 0
            for length in range(n - 1):
                sub_mass += peptide[(start + length) % n]
                spectrum.append(sub_mass)
        spectrum.append(mass(peptide))
        return spectrum

    def linear_spectrum(self, peptide):
        prefix_mass = [0]
        for residue in peptide:
            prefix_mass.append(prefix_mass[-1] + residue)
        spectrum = []
        n = len(peptide)
        for i in range(n):
            for j in range(i + 1, n + 1):
                spectrum.append(prefix_mass[j] - prefix_mass[i])
        return spectrum


class Scorer(TheoreticalSpectra):
    def score(self, peptide, spectrum, cyclic=True):
        peptide_spectrum = self.cyclic_spectrum(peptide) if cyclic else self.linear_spectrum(peptide)
        return shared_mass_count(peptide_spectrum, spectrum)

    def trim(self, leaderboard, spectrum, n):
        # ties with the n-th best linear score survive
        scored = [(peptide, self.score(peptide, spectrum, cyclic=False)) for peptide in sorted(leaderboard)]
        if len(scored) <= n:
            return set(leaderboard)
        scored.sort(key=lambda x: x[1], reverse=True)
        cutoff_score = scored[n - 1][1]
        return {p for p, s in scored if s >= cutoff_score}
