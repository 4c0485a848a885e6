"""Story editor page: markdown textarea with a live preview."""

from __future__ import annotations

from nicegui import events, ui

from story_blocks.authoring import STORY_TEMPLATES, AuthoringSession, ImageFile, ImageRejected
from story_blocks.renderers import to_html

from ..layout import page_frame
from ..state import get_context

_PLACEHOLDER = "# Tell your project's story (Markdown supported)\n\n## Introduction\n..."


@ui.page("/")
def editor_page() -> None:  # pragma: no cover - UI wiring
    ctx = get_context()
    session = AuthoringSession(ctx.form.update, ctx.form.story, config=ctx.config)
    ui.context.client.on_disconnect(session.close)

    with page_frame(
        current="/",
        title="Story Editor",
        subtitle="Headings (#), lists (-), emphasis (**) and images are supported.",
    ):
        with ui.row().classes("w-full gap-2 items-center bg-slate-50 p-3 rounded"):
            for key, template in STORY_TEMPLATES.items():
                ui.button(
                    template.label,
                    on_click=lambda _, key=key: _insert_template(session, key, editor, refresh),
                ).props("outline dense")
            ui.upload(
                label="Add image",
                auto_upload=True,
                on_upload=lambda e: _handle_image_upload(e, session, editor, refresh),
            ).props("accept=image/* dense flat")
            counter = ui.label().classes("ml-auto text-xs")

        with ui.row().classes("w-full gap-6 flex-wrap"):
            editor = ui.textarea(
                value=session.text,
                placeholder=_PLACEHOLDER,
                on_change=lambda e: _on_edit(session, e.value, refresh),
            ).classes("flex-1 min-w-[320px] font-mono").props("outlined autogrow")
            preview = ui.html("").classes("flex-1 min-w-[320px] bg-white shadow-sm p-4 prose")

        def refresh() -> None:
            preview.set_content(to_html(ctx.renderer.render_document(session.text, options=ctx.render_options())))
            counter.set_text(f"{session.char_count:,} / {ctx.config.max_chars:,}")
            counter.classes(
                replace="ml-auto text-xs " + ("text-red-600" if session.is_over_limit else "text-slate-500")
            )

        refresh()


def _on_edit(session: AuthoringSession, value: str | None, refresh) -> None:
    session.set_text(value or "")
    refresh()


def _insert_template(session: AuthoringSession, key: str, editor, refresh) -> None:
    editor.set_value(session.insert_template(key))
    refresh()


def _handle_image_upload(event: events.UploadEvent, session: AuthoringSession, editor, refresh) -> None:
    data = event.content.read()
    image = ImageFile(name=event.name, size=len(data), content_type=event.type, data=data)
    result = session.paste_image(image)
    if isinstance(result, ImageRejected):
        ui.notify(f"Image not added: {result.reason}", color="negative")
        return
    try:
        session.commit_image(result.url, get_context().uploader)
    except OSError as exc:  # pragma: no cover - user I/O
        ui.notify(f"Image upload failed: {exc}", color="negative")
    editor.set_value(session.text)
    refresh()


__all__ = ["editor_page"]
