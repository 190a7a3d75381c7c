import pytest
from hypothesis import settings

from dimensioned.catalogue import SCALES
from dimensioned.catalogue.scales import GRAMS, KILOGRAMS, SECOND
from dimensioned.core import Quantity
from dimensioned.core.dimensions import Mass

settings.register_profile("default", max_examples=100, deadline=None)
settings.load_profile("default")


@pytest.fixture(scope="session", params=sorted(SCALES), ids=str)
def catalogue_scale(request):
    return SCALES[request.param]


@pytest.fixture()
def five_kilograms() -> Quantity[Mass]:
    return Quantity(5.0, KILOGRAMS)


@pytest.fixture()
def two_hundred_grams() -> Quantity[Mass]:
    return Quantity(200.0, GRAMS)


@pytest.fixture()
def one_second():
    return Quantity(1.0, SECOND)
