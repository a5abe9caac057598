import pytest

from slhakit.reader import SLHAReader


SPECTRUM = """\
# SUSY Les Houches Accord 2 - MSSM spectrum
BLOCK SPINFO  # Program information
     1   SOFTSUSY    # spectrum calculator
     2   2.0.5       # version number
Block MODSEL  # Select model
     1    1   # sugra
BLOCK SMINPUTS  # Standard Model inputs
     1    1.27934000e+02   # alpha_em^(-1)(M_Z)
     3    1.17200000e-01   # alpha_s(M_Z)
BLOCK MASS  # Mass Spectrum
        25     1.10762378e+02   # h0
   1000022     9.59665483e+01   # ~neutralino(1)
DECAY   1000022     0.00000000E+00   # neutralino1 decays
DECAY   1000023     2.07770048E-02   # neutralino2 decays
#          BR         NDA      ID1       ID2
     2.95071995E-02    2     1000022        11   -11   # BR(~chi_20 -> ~chi_10 e+ e-)
"""


@pytest.fixture
def spectrum_text():
    return SPECTRUM


@pytest.fixture
def spectrum(spectrum_text):
    return SLHAReader.parse(spectrum_text)
