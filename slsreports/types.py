"""Enumerations, statistic flags and fixed limits shared by the reporting code."""

from __future__ import annotations

from enum import IntEnum, IntFlag

# Fixed capacities of the solver framework.
DEFAULT_HEAP_SIZE = 4194304
MAX_HEAPS = 1024
LITS_PER_CHUNK = 262144
MAX_NUM_ALG = 128
MAX_ALG_PARMS = 16
MAX_FXN_LIST = 32
MAX_CNF_LINE_LEN = 16384
MAX_REPORTS = 64
MAX_REPORT_PARMS = 8
MAX_PARM_LINE_LEN = 4096
MAX_TOTAL_PARMS = 128
MAX_ITEM_LIST = 512
MAX_ITEM_LIST_STRING_LENGTH = 1024
MAX_REPORT_HEADER_STRING = 256
RANDOM_FILE_BUFFER_SIZE = 1048576
HELP_STRING_LENGTH = 128
MAX_DYNAMIC_PARMS = 16

# Numeric bounds.
FLOAT_MAX = 1e300
FLOAT_STATS_MIN = 1e-8
UINT32_MAX = 0xFFFFFFFF
SINT32_MAX = 0x7FFFFFFF
SINT32_MIN = -0x80000000

# Groups of statistic flags.
STAT_ALL = 0xFFFFFFFF
RAM_MASK = 0x3FFFFF00
SORT_MASK = 0x001FFF00
CALC_MASK = 0x0000007E
SF_MASK = 0x3FE00000


class EventPoint(IntEnum):
    """Stages of a solver session at which triggers fire, in firing order."""

    PostParameters = 0
    ReadInInstance = 1
    PostRead = 2
    CreateData = 3
    CreateStateInfo = 4
    PreStart = 5
    PreRun = 6
    CheckRestart = 7
    PreInit = 8
    InitData = 9
    InitStateInfo = 10
    PostInit = 11
    PreStep = 12
    ChooseCandidate = 13
    PreFlip = 14
    FlipCandidate = 15
    UpdateStateInfo = 16
    PostFlip = 17
    PostStep = 18
    StepCalculations = 19
    CheckTerminate = 20
    RunCalculations = 21
    PostRun = 22
    FinalCalculations = 23
    FinalReports = 24


class ParmType(IntEnum):
    """Kinds of algorithm and report parameters."""

    UInt = 0
    SInt = 1
    Bool = 2
    String = 3
    Probability = 4
    Float = 5
    Report = 6


class DataType(IntEnum):
    """Kinds of values held by columns and custom statistics."""

    UInt = 0
    SInt = 1
    Float = 2
    String = 3


class ColType(IntEnum):
    """How a column turns the per-step values of a run into one row value."""

    Final = 0
    Mean = 1
    Stddev = 2
    CV = 3
    Min = 4
    Max = 5
    FinalDivStep = 6
    FinalDivStep100 = 7


class StatCode(IntFlag):
    """Statistics that can be requested for a column of run data."""

    MEAN = 0x00000002
    STDDEV = 0x00000004
    CV = 0x00000008
    VAR = 0x00000010
    STDERR = 0x00000020
    VMR = 0x00000040
    SUM = 0x00000080
    MEDIAN = 0x00000100
    MIN = 0x00000200
    MAX = 0x00000400
    Q05 = 0x00000800
    Q10 = 0x00001000
    Q25 = 0x00002000
    Q75 = 0x00004000
    Q90 = 0x00008000
    Q95 = 0x00010000
    Q98 = 0x00020000
    QR7525 = 0x00040000
    QR9010 = 0x00080000
    QR9505 = 0x00100000
    STEPMEAN = 0x00200000
    SOLVEMEAN = 0x00400000
    FAILMEAN = 0x00800000
    SOLVEMEDIAN = 0x01000000
    FAILMEDIAN = 0x02000000
    SOLVEMIN = 0x04000000
    FAILMIN = 0x08000000
    SOLVEMAX = 0x10000000
    FAILMAX = 0x20000000

    def needs_calculation(self) -> bool:
        """True if any moment-based statistic (mean, stddev, ...) is requested."""
        return bool(int(self) & CALC_MASK)

    def needs_sorting(self) -> bool:
        """True if any order statistic (median, quantiles, ...) is requested."""
        return bool(int(self) & SORT_MASK)

    def needs_found_split(self) -> bool:
        """True if any statistic split by solved/failed runs is requested."""
        return bool(int(self) & SF_MASK)