"""Dashboard refresh orchestration.

One refresh fetches devices, automation summary, compliance, alerts, trends
and recommendations concurrently, then runs every aggregator over the batch.
The batch is atomic: if any fetch fails nothing is applied. Device selection
resolves configuration snapshots independently; when selections race, only the
most recently issued one is applied.
"""

import asyncio
import uuid
from campus_noc.aggregators import (
    aggregate_roles,
    assemble_trends,
    bucketize_alerts_payload,
    build_kpis,
    parse_recommendations,
    parse_snapshot_history,
    render_recommendations,
    resolve_config_diff,
    rollup_compliance_payload,
    select_uptime_extrema,
    summarize_automation_payload,
    trend_points,
)
from campus_noc.models import ConfigDiff, DashboardState, DashboardView, Device
from campus_noc.models.device import index_devices
from campus_noc.utils.client import DashboardClient
from campus_noc.utils.errors import DashboardError, ErrorCodes, TransportFailure
from campus_noc.utils.logging import get_logger, log_fetch_call, log_fetch_result
from campus_noc.utils.validation import as_dict, validate_records
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable


RANGE_TOKENS = {'7d': 7, '30d': 30}

BATCH_SOURCES = ('devices', 'automation', 'compliance', 'alerts', 'trends', 'recommendations')


def range_to_days(range_token: str | int) -> int:
    """Convert a UI range token ('7d', '30d', 7 or 30) to a day window.

    Raises:
        DashboardError: INVALID_RANGE for anything else
    """
    if isinstance(range_token, int) and not isinstance(range_token, bool):
        if range_token in RANGE_TOKENS.values():
            return range_token
    elif isinstance(range_token, str) and range_token.strip().lower() in RANGE_TOKENS:
        return RANGE_TOKENS[range_token.strip().lower()]

    raise DashboardError(
        message=f'Unsupported range: {range_token!r}',
        error_code=ErrorCodes.INVALID_RANGE,
        suggestion='Use 7d or 30d',
    )


def device_records(payload: Any) -> list[Any]:
    """Unwrap the device list from ``{"devices": [...]}`` or a bare list."""
    if isinstance(payload, list):
        return payload
    devices = as_dict(payload).get('devices')
    return devices if isinstance(devices, list) else []


def build_dashboard_view(
    range_days: int,
    payloads: dict[str, Any],
    generated_at: datetime | None = None,
) -> DashboardView:
    """Run every aggregator over one fetched batch.

    Args:
        range_days: Selected trailing window (7 or 30)
        payloads: Raw backend responses keyed by BATCH_SOURCES name
        generated_at: Aggregation time (defaults to now, UTC)

    Returns:
        DashboardView with malformed-record drops recorded per source
    """
    devices, devices_dropped = validate_records(
        Device, device_records(payloads.get('devices')), 'devices'
    )
    device_index = index_devices(devices)

    automation, automation_dropped = summarize_automation_payload(payloads.get('automation'))
    compliance, compliance_dropped = rollup_compliance_payload(payloads.get('compliance'))
    alerts, alerts_dropped = bucketize_alerts_payload(payloads.get('alerts'), device_index)
    trends = assemble_trends(range_days, trend_points(payloads.get('trends')))
    bundle = parse_recommendations(payloads.get('recommendations'))
    recommendations = render_recommendations(bundle)

    return DashboardView(
        range_days=range_days,
        generated_at=generated_at or datetime.now(timezone.utc),
        devices=devices,
        kpis=build_kpis(devices, automation, alerts),
        roles=aggregate_roles(devices),
        uptime=select_uptime_extrema(devices),
        automation=automation,
        compliance=compliance,
        alerts=alerts,
        trends=trends,
        recommendations=recommendations,
        diagnostics={
            'devices': devices_dropped,
            'automation': automation_dropped,
            'compliance': compliance_dropped,
            'alerts': alerts_dropped,
            'trends': trends.dropped,
        },
    )


class DashboardOrchestrator:
    """Owns the dashboard state and coordinates refreshes and device selection."""

    def __init__(self, client: DashboardClient):
        """Initialize orchestrator.

        Args:
            client: Connected (or lazily connecting) dashboard backend client
        """
        self._client = client
        self._state = DashboardState()
        self._refresh_seq = 0
        self._selection_seq = 0

    @property
    def state(self) -> DashboardState:
        """Current dashboard state (immutable, replaced on every change)."""
        return self._state

    def _replace(self, **changes: Any) -> DashboardState:
        changes['version'] = self._state.version + 1
        self._state = self._state.model_copy(update=changes)
        return self._state

    async def refresh(self, range_token: str | int = '7d') -> DashboardState:
        """Fetch a full batch for the range and install a new dashboard view.

        On the first successful load with no device selected, the first device
        of the inventory is selected and its config diff resolved.

        Raises:
            DashboardError: INVALID_RANGE for an unsupported range token
            TransportFailure: If any fetch in the batch fails (state unchanged)
        """
        range_days = range_to_days(range_token)
        self._refresh_seq += 1
        token = self._refresh_seq
        correlation_id = uuid.uuid4().hex[:12]
        log = get_logger(correlation_id)

        log.info('Dashboard refresh started', range_days=range_days)
        try:
            payloads = await self._fetch_batch(range_days, correlation_id)
        except TransportFailure as e:
            log.error('Dashboard refresh failed', **e.to_dict())
            raise

        if token != self._refresh_seq:
            log.info('Discarding superseded refresh', range_days=range_days)
            return self._state

        view = build_dashboard_view(range_days, payloads)
        self._replace(range_days=range_days, view=view)

        dropped = {source: count for source, count in view.diagnostics.items() if count}
        if dropped:
            log.warning('Malformed records dropped during refresh', dropped=dropped)
        log.info(
            'Dashboard refresh completed',
            version=self._state.version,
            devices=len(view.devices),
        )

        if self._state.selected_device_id is None and view.devices:
            try:
                await self.select_device(view.devices[0].id)
            except DashboardError as e:
                log.warning('Default device config diff unavailable', error=e.message)

        return self._state

    async def select_device(self, device_id: str) -> ConfigDiff | None:
        """Select a device and resolve its before/after configuration snapshots.

        Returns:
            The applied ConfigDiff, or None when a newer selection superseded
            this one before its history arrived

        Raises:
            TransportFailure: If fetching the history fails and this selection
                is still the latest
        """
        self._selection_seq += 1
        token = self._selection_seq
        self._replace(selected_device_id=device_id, config_diff=None)

        log_fetch_call('config_history', {'device_id': device_id})
        try:
            payload = await self._client.get_config_history(device_id)
        except Exception as e:
            log_fetch_result('config_history', success=False, error=str(e))
            if token != self._selection_seq:
                return None
            raise TransportFailure('config history', e)
        log_fetch_result('config_history', success=True, result=payload)

        if token != self._selection_seq:
            get_logger().debug('Discarding stale config diff', device_id=device_id)
            return None

        snapshots, dropped = parse_snapshot_history(payload)
        if dropped:
            get_logger().warning(
                'Malformed snapshots dropped for device', device_id=device_id, dropped=dropped
            )
        diff = resolve_config_diff(device_id, snapshots, dropped)
        self._replace(config_diff=diff)
        return diff

    async def _fetch_batch(self, range_days: int, correlation_id: str) -> dict[str, Any]:
        """Issue all batch fetches concurrently and wait for every one of them."""
        fetchers: dict[str, Callable[[], Awaitable[Any]]] = {
            'devices': self._client.get_devices,
            'automation': lambda: self._client.get_automation_summary(range_days),
            'compliance': self._client.get_compliance,
            'alerts': self._client.get_alerts,
            'trends': lambda: self._client.get_trends(range_days),
            'recommendations': self._client.get_recommendations,
        }

        for source in BATCH_SOURCES:
            log_fetch_call(source, {'range_days': range_days}, correlation_id)

        results = await asyncio.gather(
            *(fetchers[source]() for source in BATCH_SOURCES),
            return_exceptions=True,
        )

        payloads: dict[str, Any] = {}
        failure: TransportFailure | None = None
        for source, result in zip(BATCH_SOURCES, results):
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                log_fetch_result(
                    source, success=False, error=str(result), correlation_id=correlation_id
                )
                failure = failure or TransportFailure(source, result)
                continue
            log_fetch_result(source, success=True, result=result, correlation_id=correlation_id)
            payloads[source] = result

        if failure:
            raise failure
        return payloads
