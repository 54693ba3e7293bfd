# robots_scout/report/json_report.py

"""
Генерация JSON-отчёта по разобранному robots.txt.

Сериализация RobotsDocument (правила, sitemap, аномалии) в файл.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from robots_scout.document import RobotsDocument


def document_to_dict(document: RobotsDocument) -> Dict[str, Any]:
    """Представление документа из простых типов: host, sitemaps, agents, anomalies."""
    return document.to_dict()


def render_json(document: RobotsDocument, output_path: Path | str) -> Path:
    """
    Сохраняет отчёт по документу в формате JSON по указанному пути.

    :param document: результат robots_scout.parse
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from robots_scout import parse
    from robots_scout.report.json_report import render_json
    report_path = render_json(parse("https://example.com/", text), 'reports/robots.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(document_to_dict(document), f, ensure_ascii=False, indent=2)

    return output
