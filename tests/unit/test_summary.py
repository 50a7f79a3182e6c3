from assetlens.records.models import AssetRecord
from assetlens.view.summary import compliance_level, summarize


class TestSummarize:
    def test_empty(self) -> None:
        summary = summarize([])
        assert summary.total_assets == 0
        assert summary.compliance == {}

    def test_os_labels_are_shortened(self) -> None:
        summary = summarize(
            [
                AssetRecord(os_name="Microsoft Windows 10 Pro"),
                AssetRecord(os_name="Microsoft Windows 11 Enterprise LTSC"),
            ]
        )
        assert summary.os_distribution == {"Win 10 Pro": 1, "Win 11 Enterpri..": 1}

    def test_office_placeholder_is_no_office(self) -> None:
        summary = summarize([AssetRecord(ms_office_version="2019"), AssetRecord()])
        assert summary.office_distribution == {"2019": 1, "No Office": 1}

    def test_antivirus_placeholder_is_none(self) -> None:
        summary = summarize([AssetRecord(antivirus="Defender"), AssetRecord()])
        assert summary.antivirus_distribution == {"Defender": 1, "None": 1}

    def test_compliance_counts(self) -> None:
        summary = summarize(
            [
                AssetRecord(remarks="Critical"),
                AssetRecord(remarks="Bad"),
                AssetRecord(remarks="Bad"),
                AssetRecord(),
            ]
        )
        assert summary.total_assets == 4
        assert summary.compliance == {"Critical": 1, "Bad": 2}


class TestComplianceLevel:
    def test_worst_level_wins(self) -> None:
        assert compliance_level("Bad, Critical") == "Critical"

    def test_no_level(self) -> None:
        assert compliance_level("nill") is None
