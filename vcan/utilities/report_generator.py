import datetime
import html
import logging
import os

from vcan.config import REPORT_DIR

logger = logging.getLogger(__name__)


class ReportGenerator:
    def __init__(self, output_dir=REPORT_DIR):
        self.output_dir = output_dir
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

    def generate(self, test_name, bus_log, result="PASS", failure_details=None):
        """Write an HTML report of the bus traffic and return its path."""
        now = datetime.datetime.now()
        timestamp = now.strftime("%Y-%m-%d %H:%M:%S")
        filename = os.path.join(self.output_dir, f"{test_name}_{now.strftime('%Y%m%d_%H%M%S_%f')}.html")

        report = f"""
        <html>
        <head>
            <style>
                body {{ font-family: sans-serif; padding: 20px; }}
                h1 {{ color: #333; }}
                .pass {{ color: green; }}
                .fail, .error {{ color: red; }}
                pre {{ background-color: #ffdddd; padding: 10px; }}
                table {{ border-collapse: collapse; width: 100%; margin-top: 20px; }}
                th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; font-family: monospace; }}
                th {{ background-color: #f2f2f2; }}
                tr:nth-child(even) {{ background-color: #f9f9f9; }}
                .silent {{ color: #999; }}
            </style>
        </head>
        <body>
            <h1>Test Report: {html.escape(test_name)}</h1>
            <p><strong>Time:</strong> {timestamp}</p>
            <p><strong>Result:</strong> <span class="{result.lower()}">{result}</span></p>
        """

        if failure_details:
            report += f"""
            <h2>Failure Details</h2>
            <pre>{html.escape(failure_details)}</pre>
            """

        report += """
            <h2>Bus Traffic</h2>
            <table>
                <tr>
                    <th>#</th>
                    <th>Source</th>
                    <th>CAN ID</th>
                    <th>Len</th>
                    <th>Data</th>
                    <th>Delivered</th>
                </tr>
        """

        for i, entry in enumerate(bus_log):
            msg = entry['msg']
            row_class = "silent" if entry['delivered'] == 0 else ""
            sender = "-" if entry['sender'] is None else html.escape(str(entry['sender']))
            data_str = " ".join(f"{b:02X}" for b in msg.payload)

            report += f"""
                <tr class="{row_class}">
                    <td>{i}</td>
                    <td>{sender}</td>
                    <td>0x{msg.msg_id:08X}</td>
                    <td>{msg.length}</td>
                    <td>{data_str}</td>
                    <td>{entry['delivered']}</td>
                </tr>
            """

        report += """
            </table>
        </body>
        </html>
        """

        with open(filename, "w") as f:
            f.write(report)

        logger.info("Report generated: %s", filename)
        return filename
