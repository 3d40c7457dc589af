# SPDX-FileCopyrightText: 2020-2023 JosiePy Development Team
#
# SPDX-License-Identifier: BSD-3-Clause

import pytest

from fluideos.config import EOSType, MaterialModelData


def pytest_addoption(parser):
    parser.addoption(
        "--verbose-eos",
        action="store_true",
        help=(
            "Build the material models of the tests in verbose mode, so that "
            "clipping and failed state checks are logged"
        ),
    )


@pytest.fixture
def verbose(request):
    yield request.config.getoption("--verbose-eos")


@pytest.fixture
def floors():
    """The material floors used in the clipping scenarios"""

    yield MaterialModelData(eos=EOSType.STIFFENED_GAS, rhomin=1e-6, pmin=1e-6)
