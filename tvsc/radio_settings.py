"""Radio configuration enumerations: modulation schemes, line codings and encryption."""

from enum import IntEnum


class ModulationScheme(IntEnum):
    """Modulation techniques a radio may support."""

    UNINITIALIZED = 0

    # Digital data, amplitude-based techniques.
    OOK = 1
    ASK = 2
    APSK = 3

    # Frequency-based techniques.
    FSK = 4
    AFSK = 5
    C4FM = 6
    GFSK = 7
    MFSK = 8
    MSK = 9
    GMSK = 10

    # Phase-based techniques.
    PPM = 11
    CPM = 12
    PSK = 13
    QPSK = 14
    OQPSK = 15
    QAM = 16
    SC_FDMA = 17
    TCM = 18
    WDM = 19

    # Spread spectrum techniques.
    CSS = 20
    DSSS = 21
    FHSS = 22
    THSS = 23

    # Analog data.
    AM = 24
    FM = 25
    PM = 26
    USB = 27
    LSB = 28


class LineCoding(IntEnum):
    """Line codes used to shape the transmitted bit stream."""

    NONE = 0
    WHITENING = 1
    NRZ_L = 2
    NRZ_M = 3
    NRZ_S = 4
    RZ = 5
    BIPHASE_L = 6
    BIPHASE_M = 7
    BIPHASE_S = 8
    MANCHESTER_ORIGINAL = 9
    MANCHESTER_802_3 = 10
    DIFFERENTIAL_MANCHESTER = 11
    BIPOLAR = 12


class Encryption(IntEnum):
    """Encryption applied to transmissions."""

    NO_ENCRYPTION = 0
    AES_128 = 1