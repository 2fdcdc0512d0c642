"""HTML served by the upload form route."""

from __future__ import annotations

from string import Template

UPLOAD_FORM = Template("""<!DOCTYPE html>
<html>
<head>
    <title>CSV to JSON Converter</title>
    <style>
        body {
            font-family: Arial, sans-serif;
            max-width: 600px;
            margin: 50px auto;
            padding: 20px;
            background-color: #f5f5f5;
        }
        .container {
            background: white;
            padding: 30px;
            border-radius: 10px;
            box-shadow: 0 2px 10px rgba(0,0,0,0.1);
        }
        h1 {
            color: #333;
            text-align: center;
        }
        .upload-form {
            text-align: center;
        }
        input[type="file"] {
            margin: 20px 0;
            padding: 10px;
            border: 2px dashed #ccc;
            border-radius: 5px;
        }
        input[type="submit"] {
            background: #007bff;
            color: white;
            padding: 12px 30px;
            border: none;
            border-radius: 5px;
            cursor: pointer;
        }
        .info {
            margin-top: 20px;
            padding: 15px;
            background: #e7f3ff;
            border-left: 4px solid #007bff;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>CSV to JSON Converter</h1>
        <form class="upload-form" action="$action" method="post" enctype="multipart/form-data">
            <div>
                <input type="file" name="$field" accept="$extension" required>
            </div>
            <div>
                <input type="submit" value="Convert to JSON">
            </div>
        </form>
        <div class="info">
            <strong>Instructions:</strong>
            <ul style="text-align: left;">
                <li>Select a CSV file (at most $limit_mb MB)</li>
                <li>Click "Convert to JSON" to upload and convert</li>
                <li>The converted JSON file downloads automatically</li>
                <li>The first row of your CSV is treated as column headers</li>
            </ul>
        </div>
    </div>
</body>
</html>
""")


def render_upload_form(
    *,
    action: str = "/convert",
    field: str = "csvfile",
    extension: str = ".csv",
    max_upload_bytes: int = 10 << 20,
) -> str:
    """Fill in the upload form. Raises KeyError/ValueError on a broken template."""
    return UPLOAD_FORM.substitute(
        action=action,
        field=field,
        extension=extension,
        limit_mb=max_upload_bytes // (1 << 20),
    )
