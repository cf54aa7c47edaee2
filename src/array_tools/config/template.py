# Dashboard template
DASHBOARD_TEMPLATE = '''
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Array Tools</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: #1e1e1e;
            min-height: 100vh;
            color: #e2e8f0;
        }
        .header {
            text-align: center;
            padding: 40px 20px;
        }
        .header h1 {
            font-size: 2.5em;
            font-weight: 300;
        }
        .container {
            max-width: 1200px;
            margin: 0 auto;
            padding: 0 20px;
        }
        .tools-grid {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
            gap: 20px;
            margin-bottom: 40px;
        }
        .tool-card {
            background: #2d2d2d;
            border: 1px solid #4a5568;
            border-radius: 12px;
            padding: 25px;
        }
        .tool-card h3 {
            color: #22d3ee;
            margin-bottom: 10px;
        }
        .tool-card p {
            color: #a0aec0;
            line-height: 1.5;
            margin-bottom: 15px;
        }
        .tool-card code {
            font-size: 0.85em;
            color: #cbd5e0;
        }
        .tag {
            background: rgba(34, 211, 238, 0.1);
            color: #22d3ee;
            padding: 4px 12px;
            border-radius: 20px;
            font-size: 0.8em;
        }
        .empty-state {
            text-align: center;
            padding: 60px 20px;
        }
    </style>
</head>
<body>
    <div class="header">
        <h1>Array Tools</h1>
        <p>Decode, convert, merge and diff array-like text</p>
    </div>

    <div class="container">
        <div class="tools-grid">
            {% for tool in tools %}
            <div class="tool-card">
                <h3>{{ tool.icon }} {{ tool.name }}</h3>
                <p>{{ tool.description }}</p>
                <p><code>POST {{ tool.endpoint }}</code></p>
                <div>
                    {% for tag in tool.tags %}
                    <span class="tag">{{ tag }}</span>
                    {% endfor %}
                </div>
            </div>
            {% endfor %}
        </div>

        {% if not tools %}
        <div class="empty-state">
            <h2>No tools enabled</h2>
            <p>Enable tools in config/config.json</p>
        </div>
        {% endif %}
    </div>
</body>
</html>
'''
