import pytest

from frameui.render.batch import BatchBackend, MonospaceFont
from frameui.ui.session import UiSession


@pytest.fixture
def backend():
    return BatchBackend(
        image_ratios={"square": 1.0, "wide": 4.0, "tall": 0.25, "normal": 2.0,
                      "hovered": 2.0, "active": 2.0, "empty": 1.0, "full": 1.0},
        fonts={"mono": MonospaceFont(), "kerned": MonospaceFont(kerning={("A", "V"): -0.1})},
    )


@pytest.fixture
def session():
    # Frozen clock so animation factors are reproducible
    return UiSession(clock=lambda: 100.0)
