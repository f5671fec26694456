"""Unit tests for the compliance rollup."""

from campus_noc.aggregators.compliance import rollup_compliance, rollup_compliance_payload
from campus_noc.models import RULE_CATALOG, ComplianceRecord, ComplianceState


def _record(device_id: str, status: str, rules: list[str] | None = None, name: str = '') -> ComplianceRecord:
    return ComplianceRecord.model_validate(
        {'deviceId': device_id, 'deviceName': name, 'status': status, 'failedRules': rules or []}
    )


class TestRollupCompliance:
    """Test rollup_compliance."""

    def test_findings(self):
        """Test non-compliant devices are listed with failed rule counts."""
        records = [
            _record('r1', 'compliant', name='Core Router'),
            _record('s1', 'warning', ['NTP configured'], name='Access 1'),
            _record('s2', 'non-compliant', ['SSH enabled', 'Banner configured']),
        ]

        view = rollup_compliance(records, overall_percent=33.3)

        assert view.state == ComplianceState.FINDINGS
        assert view.overall_percent == 33.3
        assert [device.device_id for device in view.non_compliant_devices] == ['s1', 's2']
        assert view.non_compliant_devices[0].device_name == 'Access 1'
        assert view.non_compliant_devices[1].device_name == 's2'
        assert view.non_compliant_devices[1].failed_rule_count == 2
        assert view.non_compliant_devices[1].failed_rules == ['SSH enabled', 'Banner configured']

    def test_all_compliant(self):
        """Test all-compliant is distinct from no data."""
        view = rollup_compliance([_record('r1', 'compliant')], overall_percent=100)

        assert view.state == ComplianceState.ALL_COMPLIANT
        assert view.all_compliant
        assert view.non_compliant_devices == []

    def test_no_data(self):
        """Test no verdicts means no data, not all compliant."""
        view = rollup_compliance([])

        assert view.state == ComplianceState.NO_DATA
        assert not view.all_compliant
        assert view.overall_percent is None

    def test_invalid_percent_is_unavailable(self):
        """Test an out-of-range percentage is not shown."""
        assert rollup_compliance([], overall_percent=140).overall_percent is None
        assert rollup_compliance([], overall_percent='85').overall_percent is None

    def test_rule_catalog_attached(self):
        """Test the rule catalog is passed through for display."""
        view = rollup_compliance([])
        assert view.rules == list(RULE_CATALOG)
        assert len(view.rules) == 4


class TestRollupCompliancePayload:
    """Test rollup_compliance_payload."""

    def test_backend_payload(self):
        """Test reading counts, percentage and device verdicts."""
        payload = {
            'overallCompliancePercent': 75,
            'compliant': 3,
            'warning': 0,
            'nonCompliant': 1,
            'devices': [
                {'deviceId': 'r1', 'status': 'compliant'},
                {'deviceId': 's2', 'status': 'non-compliant', 'failedRules': ['NTP configured']},
            ],
        }

        view, dropped = rollup_compliance_payload(payload)

        assert dropped == 0
        assert view.overall_percent == 75
        assert (view.compliant, view.warning, view.non_compliant) == (3, 0, 1)
        assert view.state == ComplianceState.FINDINGS

    def test_malformed_verdicts_dropped(self):
        """Test verdicts without failed rules and bad percentages are counted."""
        payload = {
            'overallCompliancePercent': -5,
            'devices': [
                {'deviceId': 's1', 'status': 'warning'},
                {'status': 'compliant'},
                {'deviceId': 'r1', 'status': 'compliant'},
            ],
        }

        view, dropped = rollup_compliance_payload(payload)

        assert dropped == 3
        assert view.overall_percent is None
        assert view.state == ComplianceState.ALL_COMPLIANT

    def test_missing_payload(self):
        """Test an empty payload gives no data."""
        view, dropped = rollup_compliance_payload({})
        assert view.state == ComplianceState.NO_DATA
        assert dropped == 0

    def test_counts_only_all_compliant(self):
        """Test a summary without device verdicts is still all compliant."""
        payload = {'overallCompliancePercent': 100, 'compliant': 12, 'nonCompliant': 0, 'devices': []}

        view, dropped = rollup_compliance_payload(payload)

        assert dropped == 0
        assert view.state == ComplianceState.ALL_COMPLIANT
        assert view.compliant == 12
        assert view.overall_percent == 100

    def test_counts_only_findings(self):
        """Test non-compliant counts without device verdicts are findings."""
        view, _ = rollup_compliance_payload({'compliant': 10, 'nonCompliant': 2.0})

        assert view.state == ComplianceState.FINDINGS
        assert view.non_compliant == 2
        assert view.non_compliant_devices == []
