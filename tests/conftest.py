import pytest

from peptide_sequencing.spectra import TheoreticalSpectra


@pytest.fixture()
def ideal_spectrum():
    # cyclic spectrum of 57-71-113 with the 0 mass
    return [0] + sorted(TheoreticalSpectra().cyclic_spectrum((57, 71, 113)))
