# -*- coding: utf-8 -*-
"""
Landing Pages
=============
Competitor comparison pages and per-specialty pages generated next to
the homepage on every site refresh.
"""

import re
from datetime import datetime


def comparison_filename(competitor_name: str, product_slug: str = "freed") -> str:
    slug = re.sub(r"\s+", "-", competitor_name.lower())
    return f"{product_slug}-vs-{slug}.html"


def render_comparison_page(
    competitor: dict, now: datetime, product: str = "Freed AI"
) -> str:
    name = competitor["name"]
    price = competitor["price"]
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>{product} vs {name} - {now.year} Comparison</title>
  <meta name="description" content="Compare {product} with {name}. See why doctors choose {product.split()[0]} for AI medical scribing.">
  <link rel="stylesheet" href="style.css">
</head>
<body>
  <div class="container">
    <h1>{product} vs {name}</h1>
    <div class="quick-answer">
      <strong>Quick Answer:</strong> {product} offers better value at $99/month compared to {name} at {price}/month, with faster setup and no audio storage.
    </div>
    <table>
      <tr>
        <th>Feature</th>
        <th>{product}</th>
        <th>{name}</th>
      </tr>
      <tr>
        <td>Monthly Cost</td>
        <td><strong>$99</strong></td>
        <td>{price}</td>
      </tr>
      <tr>
        <td>Setup Time</td>
        <td><strong>5 minutes</strong></td>
        <td>1-2 weeks</td>
      </tr>
      <tr>
        <td>Note Delivery</td>
        <td><strong>60 seconds</strong></td>
        <td>5-30 minutes</td>
      </tr>
      <tr>
        <td>Audio Storage</td>
        <td><strong>Never stored</strong></td>
        <td>Temporary storage</td>
      </tr>
    </table>
    <p style="margin-top: 50px; text-align: center; color: #999;">
      Auto-generated on {now.strftime("%m/%d/%Y")} | Educational Demo
    </p>
  </div>
</body>
</html>"""


def specialty_title(specialty: str) -> str:
    """'emergency-medicine' -> 'Emergency medicine'."""
    return specialty[:1].upper() + specialty[1:].replace("-", " ")


def render_specialty_page(
    specialty: str, now: datetime, product: str = "Freed AI"
) -> str:
    title = specialty_title(specialty)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>{product} for {title} - AI Medical Scribe</title>
  <meta name="description" content="How {product} helps {specialty} specialists save 2+ hours daily on documentation.">
</head>
<body>
  <h1>{product} for {title}</h1>
  <p>Specialized AI medical scribing for {specialty} professionals.</p>
  <ul>
    <li>Understands {specialty}-specific terminology</li>
    <li>Formats notes according to {specialty} standards</li>
    <li>Integrates with {specialty} EHR workflows</li>
  </ul>
  <p>Generated: {now.isoformat()}</p>
</body>
</html>"""
