"""fincalc: SIP, SWP, EMI, lumpsum, top-up and inflation projections."""

__version__ = "0.1.0"
