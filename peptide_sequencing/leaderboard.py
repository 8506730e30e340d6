from peptide_sequencing.convolution import SpectralConvolution
from peptide_sequencing.spectra import (INTEGER_MASSES, Scorer, is_positive_integer, mass, parent_mass,
                                        validate_spectrum)


class SearchState:
    INITIAL = "initial"
    EXPANDING = "expanding"
    CONVERGED = "converged"

    def __init__(self, parent_mass, expansion):
        self.status = self.INITIAL
        self.parent_mass = parent_mass
        self.expansion = expansion
        self.leaderboard = {()}
        self.leader = ()
        self.leader_score = 0
        self.rounds = 0

    def offer(self, peptide, score):
        if score > self.leader_score:
            self.leader = peptide
            self.leader_score = score
            return True
        return False

    def round_limit(self):
        # every round adds one residue of at least min(expansion) mass
        if not self.expansion:
            return 1
        return self.parent_mass // min(self.expansion) + 1


class LeaderboardConvolutionCyclopeptide(Scorer):
    def __init__(self, n, m, integer_masses=INTEGER_MASSES, max_rounds=None, on_new_leader=None):
        if not is_positive_integer(n):
            raise ValueError("The leaderboard size N must be a positive integer.")
        if not all(is_positive_integer(residue) for residue in integer_masses):
            raise ValueError("Residue masses must be positive integers.")
        if max_rounds is not None and not is_positive_integer(max_rounds):
            raise ValueError("The round limit must be a positive integer.")
        self.n = n
        self.integer_masses = set(integer_masses)
        self.max_rounds = max_rounds
        self.on_new_leader = on_new_leader
        self.spectral_convolution = SpectralConvolution(m)

    def expand(self, peptides, masses):
        expanded = set()
        for peptide in peptides:
            for residue in masses:
                expanded.add(peptide + (residue,))
        return expanded

    def initial_state(self, spectrum):
        alphabet = self.spectral_convolution.run(spectrum)
        expansion = sorted(set(alphabet) & self.integer_masses)
        return SearchState(parent_mass(spectrum), expansion)

    def search(self, spectrum):
        validate_spectrum(spectrum)
        state = self.initial_state(spectrum)
        state.status = SearchState.EXPANDING
        limit = state.round_limit()
        while state.leaderboard:
            if self.max_rounds is not None and state.rounds >= self.max_rounds:
                break
            state.rounds += 1
            if state.rounds > limit:
                raise RuntimeError(f"Search did not converge within {limit} rounds.")
            survivors = set()
            for peptide in sorted(self.expand(state.leaderboard, state.expansion)):
                peptide_mass = mass(peptide)
                if peptide_mass == state.parent_mass:
                    score = self.score(peptide, spectrum)
                    if state.offer(peptide, score) and self.on_new_leader is not None:
                        self.on_new_leader(peptide, score)
                if peptide_mass <= state.parent_mass:
                    survivors.add(peptide)
            state.leaderboard = self.trim(survivors, spectrum, self.n)
        state.status = SearchState.CONVERGED
        return state

    def run(self, spectrum):
        return list(self.search(spectrum).leader)


def sequence_leader_peptide(spectrum, n, m, valid_residue_masses=INTEGER_MASSES):
    spectrum = list(spectrum)
    return LeaderboardConvolutionCyclopeptide(n, m, valid_residue_masses).run(spectrum)
