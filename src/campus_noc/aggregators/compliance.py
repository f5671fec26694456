"""Compliance posture rollup.

Verdicts come pre-evaluated from the external rule engine. This module only
validates the supplied percentage, filters out non-compliant devices and
projects their failed rule counts for charting.
"""

from campus_noc.models import (
    RULE_CATALOG,
    ComplianceRecord,
    ComplianceState,
    ComplianceView,
    NonCompliantDevice,
)
from campus_noc.utils.numeric import coerce_percent, non_negative_int
from campus_noc.utils.validation import as_dict, as_list, validate_records
from loguru import logger
from typing import Any, Sequence


def rollup_compliance(
    records: Sequence[ComplianceRecord],
    overall_percent: Any = None,
    counts: dict[str, Any] | None = None,
) -> ComplianceView:
    """Roll up compliance verdicts into the compliance panel view.

    Args:
        records: Per-device verdicts
        overall_percent: Pre-computed overall compliance %, validated to [0, 100]
        counts: Pre-computed compliant / warning / nonCompliant counts

    Returns:
        ComplianceView whose state tells "no data" apart from "all compliant".
        No data means no verdicts, no counts and no valid percentage; counts
        alone with zero warning and non-compliant devices are all compliant.
    """
    counts = counts or {}
    non_compliant_devices = [
        NonCompliantDevice(
            device_id=record.device_id,
            device_name=record.device_name or record.device_id,
            status=record.status,
            failed_rules=list(record.failed_rules),
            failed_rule_count=len(record.failed_rules),
        )
        for record in records
        if not record.is_compliant
    ]

    percent = coerce_percent(overall_percent)
    compliant = non_negative_int(counts.get('compliant'), None)
    warning = non_negative_int(counts.get('warning'), None)
    non_compliant = non_negative_int(
        counts.get('nonCompliant', counts.get('non_compliant')), None
    )
    summary_supplied = percent is not None or any(
        count is not None for count in (compliant, warning, non_compliant)
    )

    if non_compliant_devices or (not records and (warning or non_compliant)):
        state = ComplianceState.FINDINGS
    elif records or summary_supplied:
        state = ComplianceState.ALL_COMPLIANT
    else:
        state = ComplianceState.NO_DATA

    return ComplianceView(
        overall_percent=percent,
        compliant=compliant or 0,
        warning=warning or 0,
        non_compliant=non_compliant or 0,
        state=state,
        non_compliant_devices=non_compliant_devices,
        rules=list(RULE_CATALOG),
    )


def rollup_compliance_payload(payload: Any) -> tuple[ComplianceView, int]:
    """Build the compliance view from the backend's compliance payload.

    Returns:
        Tuple of (ComplianceView, number of malformed records dropped). An
        overall percentage outside [0, 100] counts as one malformed record.
    """
    payload = as_dict(payload)
    records, dropped = validate_records(
        ComplianceRecord, as_list(payload.get('devices')), 'compliance'
    )

    raw_percent = payload.get('overallCompliancePercent', payload.get('overall_compliance_percent'))
    if raw_percent is not None and coerce_percent(raw_percent) is None:
        logger.warning('Dropping invalid overall compliance percentage', value=repr(raw_percent))
        dropped += 1

    view = rollup_compliance(records, overall_percent=raw_percent, counts=payload)
    return view, dropped

