"""NiceGUI chat interface driven by a conversation controller."""

import logging

from nicegui import Client, events, ui

from gemini_chat.conversation.controller import ConversationController, is_commit_key
from gemini_chat.models.schemas import ConversationState, Sender, TranscriptEntry

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #4285f4 0%, #9b72cb 100%); }

    .message-user {
        background: #4285f4;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .message-error {
        background: #fee2e2;
        color: #991b1b;
        border-radius: 12px;
    }
</style>
"""


def render_entry(entry: TranscriptEntry) -> None:
    """Render one transcript bubble.

    Model replies are untrusted and shown as plain text, like user input.
    """
    is_user = entry.sender == Sender.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-assistant"

    with ui.row().classes(f"w-full {align}"):
        with ui.element("div").classes(f"max-w-[75%] px-4 py-3 {bubble}"):
            ui.label(entry.text).classes("text-sm whitespace-pre-wrap")


def close_on_disconnect(controller: ConversationController, client: Client) -> None:
    """Close the page's conversation when its browser client goes away."""

    def cleanup() -> None:
        logger.info("Closing conversation for disconnected client")
        controller.close()

    client.on_disconnect(cleanup)


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Each visit starts a fresh conversation."""
    ui.add_head_html(CUSTOM_CSS)
    controller = ConversationController()

    scroll_area: ui.scroll_area
    messages_container: ui.column
    input_field: ui.textarea
    send_btn: ui.button

    def render(state: ConversationState) -> None:
        messages_container.clear()
        with messages_container:
            for entry in state.entries:
                render_entry(entry)
            if state.in_flight:
                with ui.row().classes("w-full justify-start"):
                    with ui.element("div").classes("message-assistant px-4 py-3"):
                        ui.label("Thinking...").classes("text-sm text-gray-500 italic")
            if state.error:
                with ui.element("div").classes("w-full message-error px-4 py-2"):
                    ui.label(state.error).classes("text-sm")

        if state.in_flight:
            input_field.disable()
            send_btn.disable()
            send_btn.set_text("Sending...")
        else:
            input_field.enable()
            send_btn.enable()
            send_btn.set_text("Send")
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or controller.in_flight:
            return
        input_field.value = ""
        await controller.submit(text)

    async def handle_key(e: events.GenericEventArguments) -> None:
        args = e.args if isinstance(e.args, dict) else {}
        key, shift_key = args.get("key"), bool(args.get("shiftKey"))
        text = input_field.value or ""
        if not is_commit_key(key, shift_key) or not text.strip() or controller.in_flight:
            return
        input_field.value = ""
        await controller.accept_key_commit(key, shift_key, text)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        with ui.row().classes("w-full header px-5 py-4 items-center"):
            ui.icon("smart_toy").classes("text-white text-3xl")
            ui.label("Smart Chatbot").classes("text-lg font-semibold text-white")

        with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as scroll_area:
            messages_container = ui.column().classes("w-full gap-4 p-5")

        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            input_field = (
                ui.textarea(placeholder="Type your message...")
                .props("outlined dense rows=3")
                .classes("flex-grow")
                .on("keydown.enter.exact.prevent", handle_key, args=["key", "shiftKey"])
            )
            send_btn = ui.button("Send", on_click=send_message).props("unelevated")

    controller.subscribe(render)
    render(controller.state)

    close_on_disconnect(controller, ui.context.client)


def main() -> None:
    ui.run(title="Smart Chatbot", port=8080, reload=False)


if __name__ == "__main__":
    main()
