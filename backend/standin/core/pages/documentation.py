"""Documentation: static usage guide for the API and the admin panel."""

DOCUMENTATION_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Strapi API Documentation</title>
  <style>
    body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 0; background: #f6f6f9; color: #32324d; }
    .header { background: linear-gradient(135deg, #4945ff, #7b69ff); color: white; padding: 30px 20px; text-align: center; }
    .container { max-width: 960px; margin: 0 auto; padding: 30px 20px; }
    .section { background: white; padding: 25px; border-radius: 12px; box-shadow: 0 4px 6px rgba(0,0,0,0.1); margin-bottom: 25px; }
    .section h2 { margin-top: 0; color: #4945ff; }
    code { background: #f0f0ff; padding: 2px 6px; border-radius: 4px; }
    .endpoint { padding: 10px 0; border-bottom: 1px solid #eee; }
    .endpoint:last-child { border-bottom: none; }
    .method { display: inline-block; min-width: 60px; font-weight: bold; color: #28a745; }
  </style>
</head>
<body>
  <div class="header">
    <h1>Strapi API Documentation</h1>
    <p>Version 4.x</p>
  </div>
  <div class="container">
    <div class="section">
      <h2>Getting Started</h2>
      <p>All API routes live under <code>/api</code> and answer with JSON.
      The admin panel is available at <code>/admin</code>.</p>
    </div>
    <div class="section">
      <h2>Endpoints</h2>
      <div class="endpoint"><span class="method">GET</span> <code>/api/users</code> List users</div>
      <div class="endpoint"><span class="method">POST</span> <code>/api/auth</code> Authenticate</div>
      <div class="endpoint"><span class="method">GET</span> <code>/api/content-types</code> List content types</div>
      <div class="endpoint"><span class="method">GET</span> <code>/health</code> Liveness probe</div>
    </div>
    <div class="section">
      <h2>Deployment</h2>
      <p>The service runs as a container on AWS ECS Fargate behind an
      Application Load Balancer, listening on port <code>1337</code>.</p>
    </div>
    <p><a href="/">Back to Home</a></p>
  </div>
</body>
</html>"""


def render_documentation() -> str:
    return DOCUMENTATION_PAGE
