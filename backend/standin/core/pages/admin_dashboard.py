"""Admin Dashboard: HTML page rendered from a metrics snapshot and a clock.

Invariants:
    - Exactly one snapshot per render; every log line reads the clock separately
    - Uptime is truncated, memory MiB is rounded, the memory bar is clamped at 100
    - CPU usage is the fixed placeholder, never measured
    - Every interpolated value is HTML-escaped
"""

from html import escape

from standin.core.metrics import (
    CPU_PLACEHOLDER_PERCENT, Clock, ProcessMetricsSnapshot,
    bytes_to_mb, format_percent, format_uptime, memory_percent, to_iso_instant,
)

LOG_MESSAGES = (
    "Server started successfully",
    "Listening on port 1337",
    "Health check endpoint active",
    "Admin dashboard loaded",
    "All systems operational",
)

_STYLE = """
    * { box-sizing: border-box; }
    body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 0; padding: 0; background: #f6f6f9; color: #32324d; }
    .header { background: linear-gradient(135deg, #4945ff, #7b69ff); color: white; padding: 20px; text-align: center; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
    .header h1 { margin: 0; font-size: 2.5em; }
    .header p { margin: 10px 0 0 0; opacity: 0.9; }
    .container { max-width: 1200px; margin: 0 auto; padding: 30px 20px; }
    .nav-tabs { display: flex; gap: 10px; margin-bottom: 25px; }
    .nav-tab { background: white; border: none; padding: 12px 24px; border-radius: 8px; cursor: pointer; font-size: 1em; }
    .nav-tab.active { background: #4945ff; color: white; }
    .tab-content { display: none; }
    .tab-content.active { display: block; }
    .dashboard-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(300px, 1fr)); gap: 25px; margin-bottom: 30px; }
    .widget { background: white; padding: 25px; border-radius: 12px; box-shadow: 0 4px 6px rgba(0,0,0,0.1); border-left: 5px solid #4945ff; }
    .widget h3 { margin: 0 0 15px 0; color: #4945ff; font-size: 1.3em; display: flex; align-items: center; gap: 10px; }
    .status-indicator { width: 12px; height: 12px; border-radius: 50%; background: #28a745; }
    .metric { display: flex; justify-content: space-between; align-items: center; padding: 12px 0; border-bottom: 1px solid #eee; }
    .metric:last-child { border-bottom: none; }
    .metric-value { font-weight: bold; color: #4945ff; }
    .progress-bar { width: 100%; height: 8px; background: #e9ecef; border-radius: 4px; overflow: hidden; margin: 10px 0; }
    .progress-fill { height: 100%; background: linear-gradient(90deg, #4945ff, #7b69ff); border-radius: 4px; }
    .logs-container { background: #1e1e2e; color: #cdd6f4; padding: 15px; border-radius: 8px; font-family: monospace; font-size: 0.9em; }
    .timestamp { color: #89b4fa; margin-right: 8px; }
    .action-buttons { display: flex; gap: 15px; flex-wrap: wrap; }
    .action-btn { background: #4945ff; color: white; padding: 12px 24px; border-radius: 8px; text-decoration: none; }
    .action-btn.secondary { background: #6c757d; }
"""

_SCRIPT = """
    function showTab(tabName) {
      document.querySelectorAll('.tab-content').forEach(c => c.classList.remove('active'));
      document.querySelectorAll('.nav-tab').forEach(t => t.classList.remove('active'));
      document.getElementById(tabName).classList.add('active');
      event.target.classList.add('active');
    }

    setInterval(() => {
      console.log('Refreshing metrics...');
    }, 30000);

    document.addEventListener('DOMContentLoaded', function() {
      console.log('Strapi Admin Dashboard loaded successfully');
    });
"""


def _metric(label: str, value: object) -> str:
    return (
        '<div class="metric">'
        f"<span>{escape(label)}</span>"
        f'<span class="metric-value">{escape(str(value))}</span>'
        "</div>"
    )


def _progress(percent: float) -> str:
    return (
        '<div class="progress-bar">'
        f'<div class="progress-fill" style="width: {format_percent(percent)}%"></div>'
        "</div>"
    )


def _overview_tab(snapshot: ProcessMetricsSnapshot) -> str:
    memory_mb = bytes_to_mb(snapshot.rss_bytes)
    return "\n".join([
        '<div id="overview" class="tab-content active"><div class="dashboard-grid">',
        '<div class="widget"><h3><span class="status-indicator"></span>Server Status</h3>',
        _metric("Status", "Running"),
        _metric("Uptime", format_uptime(snapshot.uptime_seconds)),
        _metric("Environment", "Production"),
        _metric("Platform", "AWS ECS Fargate"),
        "</div>",
        '<div class="widget"><h3>Performance Metrics</h3>',
        _metric("Memory Usage", f"{memory_mb} MB"),
        _progress(memory_percent(memory_mb)),
        _metric("CPU Usage", f"~{CPU_PLACEHOLDER_PERCENT}%"),
        _progress(CPU_PLACEHOLDER_PERCENT),
        _metric("Load Balancer", "Healthy"),
        "</div>",
        '<div class="widget"><h3>API Information</h3>',
        _metric("Base URL", "Port 1337"),
        _metric("Endpoints", "5 Active"),
        _metric("Database", "SQLite"),
        _metric("Authentication", "JWT Ready"),
        "</div>",
        '<div class="widget"><h3>Infrastructure</h3>',
        _metric("Container", snapshot.runtime_version),
        _metric("Load Balancer", "ALB"),
        _metric("Monitoring", "CloudWatch"),
        _metric("Security", "VPC + SG"),
        "</div>",
        "</div></div>",
    ])


def _system_tab(snapshot: ProcessMetricsSnapshot) -> str:
    return "\n".join([
        '<div id="system" class="tab-content"><div class="widget">',
        "<h3>System Information</h3>",
        _metric("Runtime Version", snapshot.runtime_version),
        _metric("Platform", snapshot.platform),
        _metric("Architecture", snapshot.arch),
        _metric("Process ID", snapshot.pid),
        _metric("Memory RSS", f"{bytes_to_mb(snapshot.rss_bytes)} MB"),
        _metric("Memory Heap Used", f"{bytes_to_mb(snapshot.heap_used_bytes)} MB"),
        "</div></div>",
    ])


def _logs_tab(clock: Clock) -> str:
    lines = [
        f'<div><span class="timestamp">[{to_iso_instant(clock.now())}]</span> '
        f"{escape(message)}</div>"
        for message in LOG_MESSAGES
    ]
    return "\n".join([
        '<div id="logs" class="tab-content"><div class="widget">',
        '<h3>Recent Logs</h3><div class="logs-container">',
        *lines,
        "</div></div></div>",
    ])


def _settings_tab() -> str:
    return "\n".join([
        '<div id="settings" class="tab-content"><div class="widget">',
        "<h3>Configuration</h3>",
        _metric("Environment", "production"),
        _metric("Host", "0.0.0.0"),
        _metric("Port", 1337),
        _metric("Database Client", "sqlite"),
        "</div></div>",
    ])


def render_admin_dashboard(
    snapshot: ProcessMetricsSnapshot, clock: Clock,
) -> str:
    """Full dashboard document for one snapshot."""
    return "\n".join([
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        "<title>Strapi Admin Dashboard</title>",
        f"<style>{_STYLE}</style>",
        "</head>",
        "<body>",
        '<div class="header"><h1>Strapi Admin Dashboard</h1>'
        "<p>Production Environment - AWS ECS Fargate</p></div>",
        '<div class="container">',
        '<div class="nav-tabs">'
        '<button class="nav-tab active" onclick="showTab(\'overview\')">Overview</button>'
        '<button class="nav-tab" onclick="showTab(\'system\')">System</button>'
        '<button class="nav-tab" onclick="showTab(\'logs\')">Logs</button>'
        '<button class="nav-tab" onclick="showTab(\'settings\')">Settings</button>'
        "</div>",
        _overview_tab(snapshot),
        _system_tab(snapshot),
        _logs_tab(clock),
        _settings_tab(),
        '<div class="action-buttons">'
        '<a href="/api" class="action-btn">API Endpoints</a>'
        '<a href="/documentation" class="action-btn">Documentation</a>'
        '<a href="/health" class="action-btn secondary">Health Check</a>'
        '<a href="/" class="action-btn secondary">Back to Home</a>'
        "</div>",
        "</div>",
        f"<script>{_SCRIPT}</script>",
        "</body>",
        "</html>",
    ])
