"""
mseedfast's testing configuration file.
"""
import numpy as np
import pytest

from mseedfast.core.util.testing import (make_archive, make_channel_records,
                                         make_record)
from mseedfast.io.mseed.btime import BTime
from mseedfast.io.mseed.headers import Encoding


# --- mseedfast fixtures


@pytest.fixture(scope='class')
def ignore_numpy_errors():
    """
    Ignore numpy errors for marked tests.
    """
    nperr = np.geterr()
    np.seterr(all='ignore')
    yield
    np.seterr(**nperr)


@pytest.fixture(scope='session')
def random_samples():
    """
    Reproducible integer samples with small and large differences.
    """
    rng = np.random.RandomState(815)
    small = np.cumsum(rng.randint(-20, 20, 600))
    large = rng.randint(-2 ** 20, 2 ** 20, 200)
    return np.concatenate([small, large, small[::-1]]).astype(np.int64)


@pytest.fixture(scope='session')
def int32_archive():
    """
    One INT32 record with 10 samples at 100 Hz starting 2020-001.
    """
    return make_record(list(range(10)), encoding=Encoding.INT32,
                       network='XX', station='TEST', channel='BHZ',
                       start=BTime(2020, 1, 0, 0, 0, 0),
                       samp_rate_factor=100, samp_rate_mult=1)


@pytest.fixture(scope='session')
def steim2_archive(random_samples):
    """
    Two stations with interleaved STEIM2 records in one logical volume.
    """
    first = make_channel_records(list(random_samples), 100, station='AAA',
                                 channel='HHZ', sampling_rate=100.0)
    second = make_channel_records(list(random_samples[:300] * 2), 100,
                                  station='BBB', channel='HHZ',
                                  sampling_rate=20.0,
                                  sequence_number=len(first) + 1)
    records = []
    for i in range(max(len(first), len(second))):
        records.extend(first[i:i + 1] + second[i:i + 1])
    return make_archive(records)
