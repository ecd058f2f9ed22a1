"""Dashboard session: the loaded dataset plus filter, sort and page state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from claimboard.config.settings import Settings
from claimboard.core.exceptions import SessionClosedError, SourceUnavailableError
from claimboard.core.models import Claim, FilterSpec, LoadState
from claimboard.core.types import LoadStatus, SortDirection
from claimboard.orchestrator.pipeline import IngestionPipeline
from claimboard.query.aggregates import chart_groupings, compute_kpis, summarize_lines
from claimboard.query.filters import CodeLabels, apply_filter, filter_options
from claimboard.query.paging import paginate, sort_claims
from claimboard.storage.dataset import ClaimsDataset


if TYPE_CHECKING:
    from pathlib import Path

    from claimboard.console.logger import DashboardConsole
    from claimboard.core.models import ChartGroupings, Finding, KPISummary, LineItem, LineSummary, Page

logger = logging.getLogger(__name__)


def _source_label(source: str | Path | bytes) -> str:
    return "<bytes>" if isinstance(source, (bytes, bytearray)) else str(source)


class DashboardSession:
    """State of one dashboard: the current dataset and the user's view of it.

    A load swaps in a completely built dataset in one step, so readers never
    see a mix of old and new records. When loads overlap, the most recently
    started one wins.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        console: DashboardConsole | None = None,
        pipeline: IngestionPipeline | None = None,
    ) -> None:
        if settings is None:
            settings = Settings()
        self.settings = settings
        self._console = console
        self._pipeline = pipeline or IngestionPipeline(settings)
        self._labels = CodeLabels(settings.code_labels)
        self._dataset = ClaimsDataset.empty()
        self._state = LoadState()
        self._filter = FilterSpec()
        self._sort_field = settings.view.sort_field
        self._sort_direction = settings.view.sort_direction
        self._page_number = 1
        self._generation = 0
        self._filtered: list[Claim] | None = None
        self._closed = False

    @property
    def dataset(self) -> ClaimsDataset:
        return self._dataset

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError("Dashboard session has been torn down")

    async def load(self, source: str | Path | bytes) -> LoadState:
        """Load a workbook and swap it in as the current dataset.

        Args:
            source: Workbook path or bytes.

        Returns:
            The resulting load state; failures resolve to LoadStatus.ERROR
            with an empty dataset rather than raising.
        """
        self._ensure_open()
        self._generation += 1
        generation = self._generation
        label = _source_label(source)
        self._state = LoadState(status=LoadStatus.LOADING, source=label)
        if self._console:
            self._console.print_header(label)

        try:
            dataset = await self._pipeline.run(source)
        except SourceUnavailableError as e:
            logger.error("Failed to load claims data: %s", e)
            return self._fail(generation, label, str(e))
        except Exception as e:
            logger.exception("Unexpected error loading %s", label)
            return self._fail(generation, label, f"Failed to load claims data: {e}")

        if generation != self._generation or self._closed:
            logger.info("Discarding superseded load of %s", label)
            return self._state
        self._swap(dataset)
        self._state = LoadState(status=LoadStatus.LOADED, source=label)
        if self._console:
            self._console.print_load_summary(dataset.get_stats(), self.kpis())
            self._console.print_findings(list(dataset.findings))
        return self._state

    def _fail(self, generation: int, label: str, error: str) -> LoadState:
        if generation != self._generation or self._closed:
            return self._state
        self._swap(ClaimsDataset.empty())
        self._state = LoadState(status=LoadStatus.ERROR, error=error, source=label)
        if self._console:
            self._console.print_error(error)
        return self._state

    def _swap(self, dataset: ClaimsDataset) -> None:
        self._dataset = dataset
        self._filtered = None
        self._page_number = 1

    def teardown(self) -> None:
        """Release the dataset; the session cannot be used afterwards."""
        self._closed = True
        self._dataset = ClaimsDataset.empty()
        self._filtered = None
        self._state = LoadState()

    def load_state(self) -> LoadState:
        return self._state

    def set_filter(self, spec: FilterSpec) -> None:
        self._ensure_open()
        self._filter = spec.model_copy(deep=True)
        self._filtered = None
        self._page_number = 1

    def set_sort(self, field: str, direction: SortDirection | str | None = None) -> None:
        """Set the sort column.

        Without a direction, re-selecting the current field flips its
        direction and a new field starts descending.
        """
        self._ensure_open()
        if field not in Claim.model_fields:
            raise ValueError(f"Unknown sort field: {field}")
        if direction is None:
            if field == self._sort_field:
                direction = SortDirection.ASC if self._sort_direction == SortDirection.DESC else SortDirection.DESC
            else:
                direction = SortDirection.DESC
        self._sort_field = field
        self._sort_direction = SortDirection(getattr(direction, "value", direction).lower())
        self._page_number = 1

    def set_page(self, page_number: int) -> None:
        self._ensure_open()
        self._page_number = page_number

    @property
    def filter(self) -> FilterSpec:
        return self._filter

    @property
    def sort(self) -> tuple[str, SortDirection]:
        return self._sort_field, self._sort_direction

    def claims(self) -> list[Claim]:
        """Current dataset with the active filter applied."""
        if self._filtered is None:
            self._filtered = apply_filter(self._dataset.claims, self._filter, self._labels)
        return list(self._filtered)

    def page(self) -> Page:
        """Current page of the sorted, filtered claims."""
        ordered = sort_claims(self.claims(), self._sort_field, self._sort_direction)
        page = paginate(ordered, self.settings.view.page_size, self._page_number)
        self._page_number = page.page_number
        return page

    def kpis(self) -> KPISummary:
        return compute_kpis(self.claims())

    def chart_groupings(self) -> ChartGroupings:
        return chart_groupings(self.claims(), self.settings.view.top_cities)

    def filter_options(self) -> dict[str, list[str]]:
        """Selectable values per filter field, drawn from the whole dataset."""
        return filter_options(self._dataset.claims, self._labels)

    def findings(self) -> list[Finding]:
        return list(self._dataset.findings)

    def claim(self, claim_id: str) -> Claim | None:
        return self._dataset.find_claim(claim_id)

    def line_items_for(self, claim_id: str) -> list[LineItem]:
        return self._dataset.line_items_for(claim_id)

    def line_summary(self, claim_id: str) -> LineSummary:
        return summarize_lines(self.line_items_for(claim_id))


def create(settings: Settings | None = None, console: DashboardConsole | None = None) -> DashboardSession:
    """Create a dashboard session handle."""
    return DashboardSession(settings, console=console)


async def load(handle: DashboardSession, source: str | Path | bytes) -> LoadState:
    """Load a source into a session, replacing its dataset."""
    return await handle.load(source)


def teardown(handle: DashboardSession) -> None:
    handle.teardown()
