"""Unit tests for ReportAggregator."""

from solid_architect.domain.entities import Principle, Severity
from solid_architect.domain.rules import Finding
from solid_architect.domain.services.report_aggregator import ReportAggregator


def _f(principle: Principle, type_name: str, member: str = "", message: str = "msg") -> Finding:
    return Finding(principle, Severity.WARNING, type_name, member, message)


class TestReportAggregator:
    def setup_method(self) -> None:
        self.aggregator = ReportAggregator()

    def test_orders_by_principle_then_type_then_member(self) -> None:
        report = self.aggregator.aggregate([
            _f(Principle.SRP, "Video"),
            _f(Principle.LSP, "Ostrich", "fly"),
            _f(Principle.DIP, "OrderService", "MySQLOrderRepository"),
            _f(Principle.LSP, "Kiwi", "fly"),
        ])
        assert [f.stable_id for f in report.findings] == [
            "DIP:OrderService:MySQLOrderRepository",
            "LSP:Kiwi:fly",
            "LSP:Ostrich:fly",
            "SRP:Video:",
        ]

    def test_duplicates_collapse_to_one(self) -> None:
        report = self.aggregator.aggregate([
            _f(Principle.LSP, "Ostrich", "fly"),
            _f(Principle.LSP, "Ostrich", "fly"),
        ])
        assert len(report.findings) == 1

    def test_surviving_duplicate_is_independent_of_input_order(self) -> None:
        first = _f(Principle.LSP, "Ostrich", "fly", "a message")
        second = _f(Principle.LSP, "Ostrich", "fly", "b message")
        forward = self.aggregator.aggregate([first, second])
        backward = self.aggregator.aggregate([second, first])
        assert forward == backward
        assert forward.findings[0].message == "a message"

    def test_aggregation_is_order_independent(self) -> None:
        findings = [
            _f(Principle.OCP, "Video", "calculateEarnings"),
            _f(Principle.ISP, "PremiumVideo", "playRandomAd"),
            _f(Principle.SRP, "Video"),
        ]
        assert self.aggregator.aggregate(findings) == self.aggregator.aggregate(reversed(findings))

    def test_type_count_is_carried(self) -> None:
        report = self.aggregator.aggregate([], type_count=9)
        assert report.type_count == 9
        assert not report.has_findings()
