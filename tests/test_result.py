"""Result document tests"""

from voyage_scan import SkillEntry, StarMarker, VoyageResult


def test_defaults():
    result = VoyageResult(1920, 1080, 5000)
    doc = result.to_dict()
    assert doc['input_width'] == 1920
    assert doc['input_height'] == 1080
    assert doc['fileSize'] == 5000
    assert doc['valid'] is False
    assert doc['error'] == ''
    assert doc['antimatter'] == 0
    for skill in ('cmd', 'dip', 'eng', 'med', 'sci', 'sec'):
        assert doc[skill] == {'skillValue': 0, 'primary': 0}


def test_fail():
    result = VoyageResult()
    result.valid = True
    assert result.fail('Could not read antimatter') is result
    assert not result.valid
    assert result.to_dict()['error'] == 'Could not read antimatter'


def test_ambiguous_marker_serialized():
    entry = SkillEntry(310, StarMarker.AMBIGUOUS)
    assert entry.to_dict() == {'skillValue': 310, 'primary': -1}
    assert entry == SkillEntry(310, StarMarker.AMBIGUOUS)
    assert entry != SkillEntry(310, StarMarker.NONE)
