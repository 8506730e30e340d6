import pytest

from peptide_sequencing.convolution import SpectralConvolution


def test_convolution_pairwise_differences():
    conv = SpectralConvolution(20)
    assert conv.convolution([0, 137, 186, 323]) == [137, 186, 323, 49, 186, 137]


def test_convolution_skips_zero_differences():
    conv = SpectralConvolution(20)
    assert conv.convolution([57, 57, 114]) == [57, 57]
    assert conv.convolution([57]) == []
    assert conv.convolution([]) == []


def test_frequencies(ideal_spectrum):
    conv = SpectralConvolution(3)
    counts = conv.frequencies(conv.convolution(ideal_spectrum))
    assert counts == {57: 4, 71: 4, 99: 1, 113: 4, 127: 1, 128: 2, 170: 2, 184: 2}


def test_restrict_includes_ties():
    conv = SpectralConvolution(1)
    convolution = [57, 57, 71, 71, 99]
    assert conv.restrict(convolution) == [57, 71]
    assert conv.restrict(convolution, 2) == [57, 71]
    assert conv.restrict(convolution, 3) == [57, 71, 99]


def test_restrict_returns_everything_below_m():
    conv = SpectralConvolution(10)
    assert conv.restrict([99, 57, 71, 57]) == [57, 71, 99]
    assert conv.restrict([]) == []


def test_restrict_residue_window():
    conv = SpectralConvolution(10)
    assert conv.restrict([56, 201, 200, 57, 13, 436]) == [57, 200]


def test_restrict_is_idempotent(ideal_spectrum):
    conv = SpectralConvolution(4)
    convolution = conv.convolution(ideal_spectrum)
    assert conv.restrict(convolution) == conv.restrict(convolution)


def test_run(ideal_spectrum):
    assert SpectralConvolution(3).run(ideal_spectrum) == [57, 71, 113]
    assert SpectralConvolution(4).run(ideal_spectrum) == [57, 71, 113, 128, 170, 184]


@pytest.mark.parametrize("m", [0, -3, 1.5, True])
def test_invalid_alphabet_size(m):
    with pytest.raises(ValueError):
        SpectralConvolution(m)
    with pytest.raises(ValueError):
        SpectralConvolution(5).restrict([57], m)
