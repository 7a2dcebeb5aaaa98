"""Localized string tables."""

from ..models.display import ConditionLabels, Locale, StringTable

STRING_TABLES: dict[Locale, StringTable] = {
    Locale.JA: StringTable(
        loading="読み込み中...",
        error_title="エラー",
        error_message="天気データを読み込めませんでした。もう一度お試しください。",
        today="今日",
        week_days=("日曜日", "月曜日", "火曜日", "水曜日", "木曜日", "金曜日", "土曜日"),
        conditions=ConditionLabels(
            clear="晴れ",
            partly_cloudy="曇り",
            cloudy="曇天",
            rainy="雨",
            snowy="雪",
            thunderstorm="雷雨",
        ),
        high="最高",
        low="最低",
        humidity="湿度",
        wind_speed="風速",
        feels_like="体感温度",
        hourly_forecast="時間別予報",
        weekly_forecast="週間予報",
        footer="東京天気予報 • Tokyo Weather",
        language_toggle="EN",
        refreshed_just_now="たった今更新",
        refreshed_one_minute="1分前に更新",
        refreshed_minutes="{minutes}分前に更新",
        key_location="場所",
        key_theme="テーマ",
        key_refresh="更新",
        key_quit="終了",
    ),
    Locale.EN: StringTable(
        loading="Loading...",
        error_title="Error",
        error_message="Weather data could not be loaded. Please try again.",
        today="Today",
        week_days=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
        conditions=ConditionLabels(
            clear="Clear",
            partly_cloudy="Partly Cloudy",
            cloudy="Cloudy",
            rainy="Rainy",
            snowy="Snowy",
            thunderstorm="Thunderstorm",
        ),
        high="High",
        low="Low",
        humidity="Humidity",
        wind_speed="Wind",
        feels_like="Feels Like",
        hourly_forecast="Hourly Forecast",
        weekly_forecast="Weekly Forecast",
        footer="Tokyo Weather Forecast",
        language_toggle="日本語",
        refreshed_just_now="Refreshed just now",
        refreshed_one_minute="Refreshed 1 min ago",
        refreshed_minutes="Refreshed {minutes} mins ago",
        key_location="Location",
        key_theme="Theme",
        key_refresh="Refresh",
        key_quit="Quit",
    ),
}


def strings_for(locale: Locale) -> StringTable:
    """Return the string table for a locale."""
    return STRING_TABLES[locale]


def toggle_locale(locale: Locale) -> Locale:
    """Return the other supported locale."""
    return Locale.EN if locale == Locale.JA else Locale.JA
