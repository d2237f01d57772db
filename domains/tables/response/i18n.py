"""Localised strings shown next to card tables.

Keyed by 2-letter language code. Unknown codes fall back to English.
"""

from types import MappingProxyType


DEFAULT_LANGUAGE = 'en'

LINKS_HEADING = MappingProxyType({
    'en': 'Links in table:',
    'de': 'Links in der Tabelle:',
    'fr': 'Liens dans le tableau :',
    'es': 'Enlaces en la tabla:',
    'it': 'Link nella tabella:',
    'pt': 'Links na tabela:',
    'nl': 'Links in de tabel:',
    'pl': 'Linki w tabeli:',
    'ru': 'Ссылки в таблице:',
    'ja': '表内のリンク:',
    'zh': '表格中的链接：',
})

# Shown under the link list while links are visible
HINT_LINKS_SHOWN = MappingProxyType({
    'en': 'Tip: `/tableprefs links off` hides this list, `/tableprefs style unicode` switches to text tables.',
    'de': 'Tipp: `/tableprefs links off` blendet diese Liste aus, `/tableprefs style unicode` wechselt zu Text-Tabellen.',
    'fr': 'Astuce : `/tableprefs links off` masque cette liste, `/tableprefs style unicode` passe aux tableaux texte.',
    'es': 'Consejo: `/tableprefs links off` oculta esta lista, `/tableprefs style unicode` cambia a tablas de texto.',
    'it': 'Suggerimento: `/tableprefs links off` nasconde questo elenco, `/tableprefs style unicode` passa alle tabelle di testo.',
    'pt': 'Dica: `/tableprefs links off` oculta esta lista, `/tableprefs style unicode` muda para tabelas de texto.',
    'nl': 'Tip: `/tableprefs links off` verbergt deze lijst, `/tableprefs style unicode` schakelt naar teksttabellen.',
    'pl': 'Wskazówka: `/tableprefs links off` ukrywa tę listę, `/tableprefs style unicode` przełącza na tabele tekstowe.',
    'ru': 'Совет: `/tableprefs links off` скрывает этот список, `/tableprefs style unicode` включает текстовые таблицы.',
    'ja': 'ヒント: `/tableprefs links off` でこの一覧を非表示、`/tableprefs style unicode` でテキスト表に切り替えます。',
    'zh': '提示：`/tableprefs links off` 隐藏此列表，`/tableprefs style unicode` 切换为文本表格。',
})

# Shown instead of the list while links are hidden
HINT_LINKS_HIDDEN = MappingProxyType({
    'en': 'This table contains links. Use `/tableprefs links on` to list them here.',
    'de': 'Diese Tabelle enthält Links. Mit `/tableprefs links on` werden sie hier aufgelistet.',
    'fr': 'Ce tableau contient des liens. Utilisez `/tableprefs links on` pour les afficher ici.',
    'es': 'Esta tabla contiene enlaces. Usa `/tableprefs links on` para mostrarlos aquí.',
    'it': 'Questa tabella contiene link. Usa `/tableprefs links on` per elencarli qui.',
    'pt': 'Esta tabela contém links. Use `/tableprefs links on` para listá-los aqui.',
    'nl': 'Deze tabel bevat links. Gebruik `/tableprefs links on` om ze hier te tonen.',
    'pl': 'Ta tabela zawiera linki. Użyj `/tableprefs links on`, aby je tu wyświetlić.',
    'ru': 'В таблице есть ссылки. Используйте `/tableprefs links on`, чтобы показать их здесь.',
    'ja': 'この表にはリンクがあります。`/tableprefs links on` でここに一覧表示します。',
    'zh': '此表格包含链接。使用 `/tableprefs links on` 在此列出。',
})


def lookup(table, language: str) -> str:
    code = (language or '').strip().lower()[:2]
    return table.get(code, table[DEFAULT_LANGUAGE])


def links_heading(language: str) -> str:
    return lookup(LINKS_HEADING, language)


def usage_hint(language: str, links_shown: bool) -> str:
    return lookup(HINT_LINKS_SHOWN if links_shown else HINT_LINKS_HIDDEN, language)
