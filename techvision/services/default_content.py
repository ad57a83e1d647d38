"""Built-in HTML used to seed each section the first time it is read."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from techvision.core.config import Settings

BUILTIN_SECTIONS: Mapping[str, str] = {
    "dashboard": """<div class="hero">
    <h1>Welcome to Your Dashboard</h1>
    <p>Access all your tools and manage your projects from here</p>
</div>
<div class="services-grid">
    <div class="service-card">
        <div class="service-icon">📊</div>
        <h3>Analytics</h3>
        <p>View your website performance and user engagement metrics</p>
    </div>
    <div class="service-card">
        <div class="service-icon">⚙️</div>
        <h3>Settings</h3>
        <p>Manage your account settings and preferences</p>
    </div>
    <div class="service-card">
        <div class="service-icon">📁</div>
        <h3>Projects</h3>
        <p>Access and manage all your active projects</p>
    </div>
</div>""",
    "about": """<h2>About TechVision Solutions</h2>
<p>Founded in 2020, TechVision Solutions is a leading technology company specializing in cutting-edge digital solutions. We help businesses transform their operations through innovative technology implementations.</p>

<h3>Our Mission</h3>
<p>To empower businesses with technology solutions that drive growth, efficiency, and innovation. We believe in creating digital experiences that not only meet current needs but anticipate future challenges.</p>

<h3>Our Values</h3>
<p><strong>Innovation:</strong> We stay at the forefront of technological advancement</p>
<p><strong>Quality:</strong> We deliver excellence in every project</p>
<p><strong>Integrity:</strong> We build trust through transparent communication</p>
<p><strong>Collaboration:</strong> We work closely with our clients as partners</p>""",
    "services": """<h2>Our Services</h2>
<p>We offer comprehensive technology solutions tailored to your business needs.</p>

<div class="services-grid">
    <div class="service-card">
        <div class="service-icon">🌐</div>
        <h3>Web Development</h3>
        <p>Full-stack web development using React, Node.js, Python, and modern frameworks.</p>
    </div>
    <div class="service-card">
        <div class="service-icon">📱</div>
        <h3>Mobile Development</h3>
        <p>Native iOS and Android apps, as well as cross-platform solutions.</p>
    </div>
    <div class="service-card">
        <div class="service-icon">☁️</div>
        <h3>Cloud Solutions</h3>
        <p>AWS, Azure, and Google Cloud implementations and migration services.</p>
    </div>
    <div class="service-card">
        <div class="service-icon">🎨</div>
        <h3>UI/UX Design</h3>
        <p>User-centered design solutions that create engaging digital experiences.</p>
    </div>
</div>""",
    "portfolio": """<h2>Our Portfolio</h2>
<p>Explore some of our recent projects and success stories.</p>

<div class="services-grid">
    <div class="service-card">
        <div class="service-icon">🏪</div>
        <h3>E-commerce Platform</h3>
        <p>Built a scalable e-commerce solution handling 10,000+ daily transactions.</p>
    </div>
    <div class="service-card">
        <div class="service-icon">🏥</div>
        <h3>Healthcare System</h3>
        <p>Developed a comprehensive patient management system for medical clinics.</p>
    </div>
    <div class="service-card">
        <div class="service-icon">🎓</div>
        <h3>Education Platform</h3>
        <p>Created an interactive learning management system for global students.</p>
    </div>
</div>""",
    "contact": """<h2>Get In Touch</h2>
<p>Ready to start your next project? Contact us today for a consultation.</p>

<div class="contact-form">
    <form id="contactForm">
        <div class="form-group">
            <label for="contactName">Full Name</label>
            <input type="text" id="contactName" name="name" required placeholder="Enter your full name">
        </div>

        <div class="form-group">
            <label for="contactEmail">Email Address</label>
            <input type="email" id="contactEmail" name="email" required placeholder="Enter your email">
        </div>

        <div class="form-group">
            <label for="contactMessage">Message</label>
            <textarea id="contactMessage" name="message" rows="5" required placeholder="Tell us about your project."></textarea>
        </div>

        <button type="submit" class="cta-button">Send Message</button>
    </form>
</div>""",
    "blog": """<h2>Latest Blog Posts</h2>
<p>Stay updated with the latest technology trends and insights.</p>

<div class="services-grid">
    <div class="service-card">
        <h3>The Future of Web Development</h3>
        <p>Exploring emerging technologies and trends shaping web development in 2024.</p>
        <p><small>Posted on March 15, 2024</small></p>
    </div>
    <div class="service-card">
        <h3>Cloud Migration Best Practices</h3>
        <p>A comprehensive guide to successfully migrating applications to the cloud.</p>
        <p><small>Posted on March 10, 2024</small></p>
    </div>
    <div class="service-card">
        <h3>Mobile App Security Tips</h3>
        <p>Essential security measures every mobile app developer should implement.</p>
        <p><small>Posted on March 5, 2024</small></p>
    </div>
</div>""",
    "adminPanel": """<h2>Admin Control Panel</h2>
<p>Welcome, Admin! You have full access to manage website content.</p>
<p>You can edit all page content by using the <strong>Content Editor</strong> from the navigation bar.</p>
<p>
    <a href="admin-editor.html">🛠️ Open Content Editor</a>
</p>""",
}


def load_section_defaults(settings: Settings) -> dict[str, str]:
    """
    Built-in defaults, overridden by CONTENT_DEFAULTS_FILE when set.

    The file must hold a JSON object of section id -> HTML string.
    Raises ValueError if it does not.
    """
    defaults = dict(BUILTIN_SECTIONS)
    if not settings.CONTENT_DEFAULTS_FILE:
        return defaults
    path = Path(settings.CONTENT_DEFAULTS_FILE)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError(f"{path} must contain a JSON object mapping section ids to HTML strings")
    defaults.update(data)
    return defaults
