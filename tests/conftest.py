"""Shared message fixtures, taken from the device documentation."""
import pytest

ENVY_READING = (
    "<msg><src>CC128-v0.11</src><dsb>00089</dsb><time>13:02:39</time><tmpr>18.7</tmpr>"
    "<sensor>1</sensor><id>01234</id><type>1</type>"
    "<ch1><watts>00345</watts></ch1><ch2><watts>02151</watts></ch2><ch3><watts>00000</watts></ch3></msg>"
)

_ENVY_SENSOR_0 = "<data><sensor>0</sensor><h250>7.608</h250><h248>7.163</h248><h246>6.541</h246><h244>3.270</h244></data>"
_ENVY_IDLE_SENSOR = (
    "<data><sensor>{n}</sensor><h250>0.000</h250><h248>0.000</h248><h246>0.000</h246><h244>0.000</h244></data>"
)

ENVY_HISTORY = (
    "<msg><src>CC128-v0.11</src><dsb>00596</dsb><time>13:11:20</time>"
    "<hist><dsw>00597</dsw><type>1</type><units>kwhr</units>"
    + _ENVY_SENSOR_0
    + "".join(_ENVY_IDLE_SENSOR.format(n=n) for n in range(1, 10))
    + "</hist></msg>"
)

CLASSIC_READING = (
    "<msg><date><dsb>00001</dsb><hr>12</hr><min>32</min><sec>01</sec></date>"
    "<src><name>CC02</name><id>12345</id><type>1</type><sver>1.06</sver></src>"
    "<ch1><watts>07806</watts></ch1><ch2><watts>00144</watts></ch2><ch3><watts>00144</watts></ch3>"
    "<tmpr>21.1</tmpr></msg>"
)

CLASSIC_HISTORY = (
    "<msg><date><dsb>00001</dsb><hr>12</hr><min>32</min><sec>13</sec></date>"
    "<src><name>CC02</name><id>12345</id><type>1</type><sver>1.06</sver></src>"
    "<ch1><watts>07752</watts></ch1><ch2><watts>00144</watts></ch2><ch3><watts>00144</watts></ch3>"
    "<tmpr>21.0</tmpr><hist>"
    "<hrs><h02>001.3</h02>"
    + "".join(f"<h{n:02d}>000.0</h{n:02d}>" for n in range(4, 27, 2))
    + "</hrs><days>"
    + "".join(f"<d{n:02d}>0000</d{n:02d}>" for n in range(1, 32))
    + "</days><mths>"
    + "".join(f"<m{n:02d}>0000</m{n:02d}>" for n in range(1, 13))
    + "</mths><yrs>"
    + "".join(f"<y{n}>0000000</y{n}>" for n in range(1, 5))
    + "</yrs></hist></msg>"
)


@pytest.fixture
def envy_reading() -> str:
    return ENVY_READING


@pytest.fixture
def envy_history() -> str:
    return ENVY_HISTORY


@pytest.fixture
def classic_reading() -> str:
    return CLASSIC_READING


@pytest.fixture
def classic_history() -> str:
    return CLASSIC_HISTORY
