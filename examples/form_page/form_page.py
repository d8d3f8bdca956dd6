# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FormPage - Example page written with HtmlBuilder.

A didactic example showing nesting, conditions and callbacks
in a single chain.

Usage:
    python examples/form_page/form_page.py
"""

from __future__ import annotations

import logging

from genro_html import HtmlBuilder, minify


def form_page(errors: list[str], user: str | None = None) -> str:
    """Return a page with a contact form and an optional error list.

    Args:
        errors: Error messages to list above the form, if any.
        user: Name of the logged user, greeted when present.
    """
    return (
        HtmlBuilder(strict=True)
        .node('<!DOCTYPE html>')
        .open('html', lang='en')
            .open('head')
                .meta(charset='utf-8')
                .title('HTML Forms')
            .close()
            .open('body')
                .element('h1', 'HTML Forms', {'class': 'title'})
                .condition(user)
                .p(f'Welcome back, {user}!')
                .condition(errors)
                .open('ul', class_='errors')
                    .do(lambda html: [html.li(error) for error in errors])
                .close()
                .open('form', method='POST')
                    .h2('Example', class_='subtitle')
                    .p('This is an example form.')
                    .br()
                    .open('fieldset')
                        .legend('Form 1', style='color: #333;')
                        .label('Message: ', for_='message', class_='text')
                        .input({'type': 'text', 'id': 'message', 'required': None})
                        .entity('nbsp')
                        .input(type='submit', value='Submit')
                    .close()
                .close()
            .close()
        .close()
        .render()
    )


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)

    page = form_page(['Message is required'], user='Ada')
    print(page)
    print()
    print(minify(page))
