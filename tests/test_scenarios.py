"""Tests for the paired violation/obeying scenarios."""

from decimal import Decimal

import pytest

from core.domain.errors import (
    DemoError,
    IncompleteBuildError,
    MissingDependencyError,
    ShapeNotSupportedError,
    SmsTooLongError,
    UnsupportedActionError,
)
from scenarios import SCENARIOS, builder, dip, isp, lsp, ocp, srp


@pytest.mark.parametrize("scenario", list(SCENARIOS.values()), ids=lambda s: s.principle.value)
def test_obeying_variants_never_raise(scenario, sink):
    scenario.run_obeying(sink)
    assert sink.lines


class TestSRP:
    def test_violation_does_everything_itself(self, sink):
        srp.run_violation(sink)
        assert sink.lines == [
            "Adding product: Laptop, Price: 1200.00",
            "Saving to database...",
            "Printing report...",
        ]

    def test_obeying_delegates(self, sink):
        srp.run_obeying(sink)
        assert sink.lines == [
            "Adding product: Laptop, Price: 1200.00",
            "Saving to database...",
            "Generating report...",
        ]

    def test_service_uses_injected_repository(self, sink):
        repository = srp.InMemoryProductRepository(sink)
        service = srp.ProductService(sink, repository, srp.ConsoleReportGenerator(sink))
        service.add_product("Mouse", Decimal("25.50"))
        assert repository.saved == [("Mouse", Decimal("25.50"))]


class TestOCP:
    def test_violation_rejects_unknown_shape(self, sink):
        with pytest.raises(ShapeNotSupportedError, match="Shape not supported"):
            ocp.ShapeAreaCalculatorV().calculate_area(ocp.Triangle(base=6, height=3))

    def test_violation_output(self, sink):
        ocp.run_violation(sink)
        assert sink.lines == [
            "Circle area: 78.54",
            "Square area: 16.00",
            "Triangle: Error: Shape not supported",
        ]

    def test_obeying_output(self, sink):
        ocp.run_obeying(sink)
        assert sink.lines == [
            "Circle area: 78.54",
            "Square area: 16.00",
            "Triangle area: 9.00",
        ]

    def test_new_shape_needs_no_calculator_change(self):
        class Rectangle:
            def area(self):
                return 2.0 * 3.0

        assert isinstance(Rectangle(), ocp.Shape)
        assert ocp.ShapeAreaCalculator().calculate_area(Rectangle()) == 6.0

    def test_areas(self):
        assert ocp.Circle(radius=1).area() == pytest.approx(3.14159, rel=1e-5)
        assert ocp.Square(side=4).area() == 16
        assert ocp.Triangle(base=6, height=3).area() == 9


class TestLSP:
    def test_violation_raises_for_long_sms(self, sink):
        with pytest.raises(SmsTooLongError, match="SMS too long!"):
            lsp.run_violation(sink)
        assert sink.lines == ["[Email] Hello via Email"]

    def test_short_sms_is_sent(self, sink):
        lsp.SmsNotificationV(sink).send("Hi there")
        assert sink.lines == ["[SMS] Hi there"]

    def test_message_at_limit_is_accepted(self, sink):
        lsp.SmsNotificationV(sink, max_length=5).send("12345")
        with pytest.raises(SmsTooLongError) as info:
            lsp.SmsNotificationV(sink, max_length=5).send("123456")
        assert info.value.length == 6
        assert info.value.limit == 5

    def test_obeying_truncates(self, sink):
        lsp.run_obeying(sink)
        assert sink.lines == [
            "[Email] Hello via Email!",
            "[SMS] This message is way ...",
        ]

    def test_limit_comes_from_settings(self, sink, monkeypatch):
        monkeypatch.setenv("SOLID_DEMOS_SMS_MAX_LENGTH", "4")
        lsp.run_obeying(sink)
        assert sink.lines[-1] == "[SMS] This..."

    @pytest.mark.parametrize(
        "message, expected",
        [("short", "short"), ("x" * 20, "x" * 20), ("x" * 21, "x" * 20 + "...")],
    )
    def test_truncate(self, message, expected):
        assert lsp.truncate(message, 20) == expected


class TestISP:
    def test_violation_reports_unsupported_action(self, sink):
        isp.run_violation(sink)
        assert sink.lines == ["Robot is working tirelessly.", "Error: Robots don't eat!"]

    def test_human_satisfies_fat_interface(self, sink):
        human: isp.WorkerV = isp.HumanWorkerV(sink)
        human.work()
        human.eat()
        human.sleep()
        assert sink.lines == ["Human is working.", "Human is eating lunch.", "Human is sleeping."]

    def test_robot_cannot_sleep(self, sink):
        with pytest.raises(UnsupportedActionError, match="sleep"):
            isp.RobotWorkerV(sink).sleep()

    def test_unsupported_action_is_not_implemented(self):
        assert issubclass(UnsupportedActionError, NotImplementedError)
        assert issubclass(UnsupportedActionError, DemoError)

    def test_obeying_output(self, sink):
        isp.run_obeying(sink)
        assert sink.lines == [
            "Robot is working tirelessly.",
            "Human is working.",
            "Human is eating lunch.",
            "Human is sleeping.",
        ]

    def test_robot_implements_only_work(self, sink):
        robot = isp.RobotWorker(sink)
        assert isinstance(robot, isp.Workable)
        assert not isinstance(robot, isp.Eatable)
        assert not isinstance(robot, isp.Sleepable)


class TestDIP:
    def test_violation_only_sends_email(self, sink):
        dip.run_violation(sink)
        assert sink.lines == ["[Email] System update available!"]

    def test_obeying_output(self, sink):
        dip.run_obeying(sink)
        assert sink.lines == [
            "[Email] System update available via Email!",
            "[SMS] System update available via SMS!",
        ]

    def test_service_requires_sender(self):
        with pytest.raises(MissingDependencyError, match="sender is required"):
            dip.NotificationService(None)

    def test_any_sender_can_be_injected(self):
        sent = []

        class FakeSender:
            def send(self, message):
                sent.append(message)

        dip.NotificationService(FakeSender()).notify("ping")
        assert sent == ["ping"]


class TestBuilder:
    def test_both_variants_describe_the_same_car(self, sink):
        builder.run_violation(sink)
        builder.run_obeying(sink)
        assert sink.lines == ["2024 Blue Toyota Corolla (Sunroof: True)"] * 2

    def test_build_requires_make_and_model(self):
        with pytest.raises(IncompleteBuildError) as info:
            builder.Car.Builder().set_make("Toyota").build()
        assert info.value.missing == ["model"]

    def test_builder_is_reusable(self):
        b = builder.Car.Builder().set_make("Mazda").set_model("3")
        first = b.set_color("Red").build()
        second = b.set_color("Grey").build()
        assert first is not second
        assert first.color == "Red"
        assert second.color == "Grey"

    def test_unset_fields_keep_defaults(self):
        car = builder.Car.Builder().set_make("Honda").set_model("Civic").build()
        assert car.has_sunroof is False
        assert str(car) == "None None Honda Civic (Sunroof: False)"
