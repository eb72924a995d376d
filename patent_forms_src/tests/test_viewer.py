import pytest

from patent_forms.core.form_common import DocumentKind
from patent_forms.core.viewer import DocumentViewer


def test_starts_closed():
    viewer = DocumentViewer()
    assert viewer.current is None
    assert viewer.is_open is False


def test_open_switch_and_close():
    viewer = DocumentViewer()
    viewer.open(DocumentKind.GRANT_REQUEST)
    assert viewer.current is DocumentKind.GRANT_REQUEST
    viewer.open("cover_letter")
    assert viewer.current is DocumentKind.COVER_LETTER
    assert viewer.is_open
    viewer.close()
    assert viewer.current is None
    viewer.close()
    assert viewer.current is None


@pytest.mark.parametrize("bad", ["form4", "", None])
def test_invalid_kind_rejected(bad):
    viewer = DocumentViewer()
    viewer.open(DocumentKind.EXAMINATION_REQUEST)
    with pytest.raises(ValueError):
        viewer.open(bad)
    assert viewer.current is DocumentKind.EXAMINATION_REQUEST
