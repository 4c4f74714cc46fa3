import gradio as gr

from tabular_editor.handlers import (
    add_column_handler,
    add_row_handler,
    delete_column_handler,
    delete_row_handler,
    duplicate_row_handler,
    export_table_handler,
    load_table_handler,
    new_table_handler,
    refresh_status_handler,
    rename_column_handler,
    save_table_handler,
    search_handler,
)
from tabular_editor.logging_setup import setup_logging
from tabular_editor.settings import settings

# --- UI Definition ---
with gr.Blocks(title="Tabular Editor") as demo:
    gr.Markdown("# CSV / JSON / JSON Lines Editor")
    gr.Markdown("Open a data file, edit it as a table, then save it or export it to another format.")

    # State
    table_state = gr.State()

    with gr.Tab("Editor"):
        with gr.Row():
            # Left Panel: File & Structure
            with gr.Column(scale=1):
                gr.Markdown("### 1. Open")
                file_input = gr.File(label="Open Data File", file_types=[".csv", ".json", ".jsonl"])
                new_file_btn = gr.Button("New File")
                status_msg = gr.Textbox(label="Status", interactive=False)
                file_info = gr.Textbox(label="File", interactive=False)
                column_types = gr.Textbox(label="Column Types", interactive=False)

                gr.Markdown("### 2. Rows")
                row_number = gr.Number(label="Row Number", value=1, precision=0)
                with gr.Row():
                    add_row_btn = gr.Button("Add Row")
                    duplicate_row_btn = gr.Button("Duplicate Row")
                    delete_row_btn = gr.Button("Delete Row", variant="stop")

                gr.Markdown("### 3. Columns")
                column_selector = gr.Dropdown(label="Column", choices=[], value=None, interactive=True)
                column_name = gr.Textbox(label="Column Name", placeholder="column name")
                with gr.Row():
                    add_col_btn = gr.Button("Add Column")
                    rename_col_btn = gr.Button("Rename Column")
                    delete_col_btn = gr.Button("Delete Column", variant="stop")

            # Right Panel: Table, Search & Output
            with gr.Column(scale=2):
                gr.Markdown("### 4. Edit")
                table_view = gr.Dataframe(
                    interactive=True,
                    wrap=True,
                    type="pandas",
                    label="Table",
                )

                search_box = gr.Textbox(label="Search", placeholder="Filter rows containing...")
                search_results = gr.Dataframe(label="Matching Rows", interactive=False, type="pandas")

                gr.Markdown("### 5. Save & Export")
                save_btn = gr.Button("Save", variant="primary")
                save_output = gr.File(label="Saved File")

                export_format = gr.Radio(choices=["csv", "json", "jsonl"], value="csv", label="Export Format")
                export_filename = gr.Textbox(label="Export Filename (optional)", placeholder="output")
                export_btn = gr.Button("Export")
                export_output = gr.File(label="Exported File")

        loaded_outputs = [table_state, table_view, status_msg, file_info, column_types, column_selector]
        edited_outputs = [table_view, status_msg, file_info, column_types, column_selector]

        file_input.upload(
            fn=load_table_handler,
            inputs=[file_input],
            outputs=loaded_outputs,
        )

        new_file_btn.click(
            fn=new_table_handler,
            inputs=[],
            outputs=loaded_outputs,
        )

        table_view.input(
            fn=refresh_status_handler,
            inputs=[table_state, table_view],
            outputs=[file_info, column_types],
        )

        add_row_btn.click(fn=add_row_handler, inputs=[table_state, table_view], outputs=edited_outputs)
        duplicate_row_btn.click(
            fn=duplicate_row_handler,
            inputs=[table_state, table_view, row_number],
            outputs=edited_outputs,
        )
        delete_row_btn.click(
            fn=delete_row_handler,
            inputs=[table_state, table_view, row_number],
            outputs=edited_outputs,
        )

        add_col_btn.click(
            fn=add_column_handler,
            inputs=[table_state, table_view, column_name],
            outputs=edited_outputs,
        )
        rename_col_btn.click(
            fn=rename_column_handler,
            inputs=[table_state, table_view, column_selector, column_name],
            outputs=edited_outputs,
        )
        delete_col_btn.click(
            fn=delete_column_handler,
            inputs=[table_state, table_view, column_selector],
            outputs=edited_outputs,
        )

        search_box.change(
            fn=search_handler,
            inputs=[table_view, search_box],
            outputs=[search_results],
        )

        save_btn.click(
            fn=save_table_handler,
            inputs=[table_state, table_view],
            outputs=[save_output, table_state, status_msg, file_info],
        )

        export_btn.click(
            fn=export_table_handler,
            inputs=[table_state, table_view, export_format, export_filename],
            outputs=[export_output, status_msg],
        )

if __name__ == "__main__":
    setup_logging()
    demo.launch(server_name=settings.SERVER_NAME, server_port=settings.SERVER_PORT)
