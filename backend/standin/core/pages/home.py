"""Home Page: static landing page, served for every unmatched path."""

HOME_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Strapi CMS on AWS ECS</title>
  <style>
    body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 0; background: #f6f6f9; color: #32324d; }
    .hero { background: linear-gradient(135deg, #4945ff, #7b69ff); color: white; padding: 60px 20px; text-align: center; }
    .hero h1 { margin: 0; font-size: 3em; }
    .hero p { margin: 15px 0 0 0; font-size: 1.2em; opacity: 0.9; }
    .container { max-width: 960px; margin: 0 auto; padding: 40px 20px; }
    .cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 20px; }
    .card { background: white; padding: 25px; border-radius: 12px; box-shadow: 0 4px 6px rgba(0,0,0,0.1); text-decoration: none; color: inherit; }
    .card h3 { margin: 0 0 10px 0; color: #4945ff; }
    .footer { text-align: center; padding: 20px; color: #8e8ea9; }
  </style>
</head>
<body>
  <div class="hero">
    <h1>Strapi CMS</h1>
    <p>Headless CMS deployed on AWS ECS Fargate</p>
  </div>
  <div class="container">
    <div class="cards">
      <a class="card" href="/admin"><h3>Admin Panel</h3><p>Server status, performance metrics and logs.</p></a>
      <a class="card" href="/api"><h3>REST API</h3><p>Content API entry point and available endpoints.</p></a>
      <a class="card" href="/documentation"><h3>Documentation</h3><p>How to use the API and the admin panel.</p></a>
      <a class="card" href="/health"><h3>Health Check</h3><p>Liveness probe for the load balancer.</p></a>
    </div>
  </div>
  <div class="footer">Powered by Strapi CMS on AWS ECS</div>
</body>
</html>"""


def render_home() -> str:
    return HOME_PAGE
