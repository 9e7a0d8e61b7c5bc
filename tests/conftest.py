import httpx
import pytest

from faculty.config import DirectoryConfig
from faculty.data import FacultyLoader


SOURCE_URL = "https://sheets.example.test/pub?output=csv"

SAMPLE_CSV = (
    "Name,Position,Areas of Research,Other Affiliations,Courses,Awards,"
    "Google Scholar,LinkedIn,BSc,BSc School,MSc,MSc School,PhD,PhD School\r\n"
    "Ann Smith,Lecturer,Machine Learning,Data Lab,\"CS101, CS102\",,"
    "scholar.google.com/ann,,2001,Univ A,,,,\r\n"
    "Bo Chen,Professor,\"Robotics, Control\",,\"ME200\nME300\",Best Paper,"
    ",https://linkedin.com/in/bo,1990,Univ B,1992,Univ C,1996,Univ D\r\n"
    ",Professor,Ghost row,,,,,,,,,,,\r\n"
)


@pytest.fixture
def config():
    return DirectoryConfig(source_url=SOURCE_URL, photos_dir="photos", photo_ext=".jpg")


@pytest.fixture
def make_loader(config):
    """Build a loader whose fetch is answered by ``handler`` instead of the network."""

    def _make(body=SAMPLE_CSV, status_code=200, calls=None):
        def handler(request: httpx.Request) -> httpx.Response:
            if calls is not None:
                calls.append(str(request.url))
            return httpx.Response(status_code, text=body)

        return FacultyLoader(config, transport=httpx.MockTransport(handler))

    return _make
