"""
Tests for HolidayCalendar and holiday_calendar contract

Покрывает:
- Дефолтные праздники РФ 2025
- Год без данных → праздников нет
- Загрузка из dict/JSON файла с валидацией по JSON Schema
- Соответствие протоколу HolidayCalendar
"""

import json
from datetime import date

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    HolidayCalendarValidator,
    SchemaLoader,
    validate_holiday_calendar,
)
from src.schedule.holidays import (
    DEFAULT_HOLIDAY_CALENDAR,
    RU_HOLIDAYS_2025,
    HolidayCalendar,
    StaticHolidayCalendar,
    load_holiday_calendar,
)


@pytest.fixture
def valid_calendar_data():
    """Валидные данные календаря."""
    return {
        "schema_version": "1",
        "country": "RU",
        "years": {
            "2025": ["2025-01-01", "2025-05-09"],
            "2026": ["2026-01-01"],
        },
    }


class TestStaticHolidayCalendar:
    """Тесты для StaticHolidayCalendar"""

    def test_default_2025_holidays(self) -> None:
        assert DEFAULT_HOLIDAY_CALENDAR.is_holiday(date(2025, 1, 1))
        assert DEFAULT_HOLIDAY_CALENDAR.is_holiday(date(2025, 3, 10))
        assert DEFAULT_HOLIDAY_CALENDAR.is_holiday(date(2025, 12, 31))
        assert not DEFAULT_HOLIDAY_CALENDAR.is_holiday(date(2025, 1, 9))
        assert len(RU_HOLIDAYS_2025) == 16

    def test_year_without_data_has_no_holidays(self) -> None:
        """Нет данных за год → is_holiday всегда False"""
        assert not DEFAULT_HOLIDAY_CALENDAR.has_year(2026)
        assert not DEFAULT_HOLIDAY_CALENDAR.is_holiday(date(2026, 1, 1))
        assert DEFAULT_HOLIDAY_CALENDAR.holidays_for(2026) == frozenset()

    def test_empty_calendar(self) -> None:
        calendar = StaticHolidayCalendar()
        assert calendar.years == frozenset()
        assert not calendar.is_holiday(date(2025, 1, 1))

    def test_wrong_year_rejected(self) -> None:
        with pytest.raises(ValueError):
            StaticHolidayCalendar({2025: [date(2026, 1, 1)]})

    def test_source_mapping_copied(self) -> None:
        """Изменение исходного словаря не влияет на календарь"""
        source = {2025: {date(2025, 1, 1)}}
        calendar = StaticHolidayCalendar(source)
        source[2025].add(date(2025, 1, 2))
        assert not calendar.is_holiday(date(2025, 1, 2))

    def test_conforms_to_protocol(self) -> None:
        assert isinstance(StaticHolidayCalendar(), HolidayCalendar)


class TestCalendarLoading:
    """Тесты загрузки календаря из данных"""

    def test_from_dict(self, valid_calendar_data) -> None:
        calendar = StaticHolidayCalendar.from_dict(valid_calendar_data)
        assert calendar.years == frozenset({2025, 2026})
        assert calendar.is_holiday(date(2025, 5, 9))
        assert calendar.is_holiday(date(2026, 1, 1))
        assert not calendar.is_holiday(date(2025, 1, 2))

    def test_load_from_file(self, tmp_path, valid_calendar_data) -> None:
        path = tmp_path / "holidays.json"
        path.write_text(json.dumps(valid_calendar_data), encoding="utf-8")

        calendar = load_holiday_calendar(path)

        assert calendar.is_holiday(date(2026, 1, 1))

    def test_invalid_calendar_date(self, valid_calendar_data) -> None:
        """Формат совпадает, но даты не существует"""
        valid_calendar_data["years"]["2025"] = ["2025-02-30"]
        with pytest.raises(ValueError):
            StaticHolidayCalendar.from_dict(valid_calendar_data)

    def test_date_under_wrong_year(self, valid_calendar_data) -> None:
        valid_calendar_data["years"]["2025"] = ["2024-12-31"]
        with pytest.raises(ValueError):
            StaticHolidayCalendar.from_dict(valid_calendar_data)

    def test_schema_violation(self, valid_calendar_data) -> None:
        valid_calendar_data["schema_version"] = "2"
        with pytest.raises(ValidationError):
            StaticHolidayCalendar.from_dict(valid_calendar_data)


class TestHolidayCalendarContract:
    """Тесты JSON Schema контракта holiday_calendar"""

    def test_schema_loads(self) -> None:
        schema = SchemaLoader().load_schema("holiday_calendar")
        assert schema["title"] == "holiday_calendar"

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_valid_data(self, valid_calendar_data) -> None:
        validate_holiday_calendar(valid_calendar_data)
        assert HolidayCalendarValidator().is_valid(valid_calendar_data)

    def test_missing_required_field(self, valid_calendar_data) -> None:
        del valid_calendar_data["years"]
        with pytest.raises(ValidationError):
            validate_holiday_calendar(valid_calendar_data)

    def test_bad_year_key(self, valid_calendar_data) -> None:
        valid_calendar_data["years"]["25"] = []
        assert not HolidayCalendarValidator().is_valid(valid_calendar_data)

    def test_bad_date_format(self, valid_calendar_data) -> None:
        valid_calendar_data["years"]["2025"] = ["01.01.2025"]
        errors = list(HolidayCalendarValidator().iter_errors(valid_calendar_data))
        assert len(errors) == 1

    def test_duplicate_dates(self, valid_calendar_data) -> None:
        valid_calendar_data["years"]["2025"] = ["2025-01-01", "2025-01-01"]
        assert not HolidayCalendarValidator().is_valid(valid_calendar_data)

    def test_unknown_field(self, valid_calendar_data) -> None:
        valid_calendar_data["source"] = "manual"
        assert not HolidayCalendarValidator().is_valid(valid_calendar_data)
