"""Default records for a fresh installation.

Used by the server seed step and by the client fallback store, so both start
from the same demo content.
"""

DEMO_USERS = [
    {
        "name": "Admin User",
        "email": "admin@assetmagnets.com",
        "password": "admin123",
        "role": "admin",
    },
    {
        "name": "John Doe",
        "email": "john@example.com",
        "password": "password123",
        "role": "student",
    },
    {
        "name": "Jane Smith",
        "email": "jane@example.com",
        "password": "password123",
        "role": "instructor",
    },
]

DEFAULT_SERVICES = [
    {
        "title": "AI Consulting",
        "description": (
            "Comprehensive AI strategy and implementation consulting for businesses "
            "looking to leverage artificial intelligence."
        ),
        "short_description": "Expert AI strategy and implementation guidance",
        "icon": "🤖",
        "features": [
            "AI Strategy Development",
            "Technology Assessment",
            "Implementation Planning",
            "ROI Analysis",
        ],
        "price": {"basic": 5000, "premium": 15000, "enterprise": 50000},
        "category": "Consulting",
        "status": "active",
        "popularity": 95,
        "clients": 150,
        "rating": 4.8,
    },
]

DEFAULT_CONTACT_INFO = [
    {
        "type": "address",
        "title": "Office Address",
        "value": "123 AI Street, Tech Valley, CA 94000",
        "icon": "📍",
        "is_active": True,
        "order": 1,
    },
    {
        "type": "phone",
        "title": "Phone Number",
        "value": "+1 (555) 123-ASSET",
        "icon": "📞",
        "is_active": True,
        "order": 2,
    },
    {
        "type": "email",
        "title": "Email Address",
        "value": "contact@assetmagnets.com",
        "icon": "✉️",
        "is_active": True,
        "order": 3,
    },
    {
        "type": "hours",
        "title": "Business Hours",
        "value": "Mon-Fri: 9:00 AM - 6:00 PM PST",
        "icon": "🕒",
        "is_active": True,
        "order": 4,
    },
]

DEFAULT_GLOBAL_OFFICES = [
    {
        "name": "Headquarters - Silicon Valley",
        "address": "123 AI Street, Tech Valley",
        "city": "San Francisco",
        "country": "United States",
        "phone": "+1 (555) 123-ASSET",
        "email": "hq@assetmagnets.com",
        "timezone": "PST (UTC-8)",
        "is_headquarters": True,
        "is_active": True,
        "coordinates": {"lat": 37.7749, "lng": -122.4194},
        "working_hours": "Mon-Fri: 9:00 AM - 6:00 PM PST",
    },
    {
        "name": "European Office - London",
        "address": "456 Innovation Lane, Tech District",
        "city": "London",
        "country": "United Kingdom",
        "phone": "+44 20 7946 0958",
        "email": "europe@assetmagnets.com",
        "timezone": "GMT (UTC+0)",
        "is_headquarters": False,
        "is_active": True,
        "coordinates": {"lat": 51.5074, "lng": -0.1278},
        "working_hours": "Mon-Fri: 9:00 AM - 5:00 PM GMT",
    },
    {
        "name": "Asia Pacific - Singapore",
        "address": "789 Digital Hub, Marina Bay",
        "city": "Singapore",
        "country": "Singapore",
        "phone": "+65 6123 4567",
        "email": "apac@assetmagnets.com",
        "timezone": "SGT (UTC+8)",
        "is_headquarters": False,
        "is_active": True,
        "coordinates": {"lat": 1.3521, "lng": 103.8198},
        "working_hours": "Mon-Fri: 9:00 AM - 6:00 PM SGT",
    },
]

DEFAULT_FAQS = [
    {
        "question": "What AI services does ASSETMAGNETS offer?",
        "answer": (
            "We offer comprehensive AI solutions including AI consulting, machine learning "
            "implementation, natural language processing, computer vision, predictive analytics, "
            "and custom AI model development tailored to your business needs."
        ),
        "category": "Services",
        "order": 1,
        "is_active": True,
        "tags": ["AI", "services", "consulting", "machine learning"],
    },
    {
        "question": "How long does an AI implementation project typically take?",
        "answer": (
            "Project timelines vary based on complexity and scope. Simple AI integrations can take "
            "2-4 weeks, while comprehensive enterprise solutions may require 3-6 months. We provide "
            "detailed timelines during our initial consultation."
        ),
        "category": "Timeline",
        "order": 2,
        "is_active": True,
        "tags": ["timeline", "implementation", "project"],
    },
    {
        "question": "Do you provide training for our team?",
        "answer": (
            "Yes! We offer comprehensive training programs including AI fundamentals, hands-on "
            "workshops, certification courses, and ongoing support to ensure your team can "
            "effectively use and maintain AI solutions."
        ),
        "category": "Training",
        "order": 3,
        "is_active": True,
        "tags": ["training", "education", "team", "support"],
    },
    {
        "question": "What industries do you serve?",
        "answer": (
            "We serve various industries including healthcare, finance, retail, manufacturing, "
            "technology, education, and more. Our AI solutions are customized to meet specific "
            "industry requirements and compliance standards."
        ),
        "category": "Industries",
        "order": 4,
        "is_active": True,
        "tags": ["industries", "healthcare", "finance", "retail"],
    },
    {
        "question": "How do you ensure data security and privacy?",
        "answer": (
            "We implement enterprise-grade security measures including data encryption, secure "
            "cloud infrastructure, compliance with GDPR/CCPA, regular security audits, and strict "
            "access controls to protect your sensitive data."
        ),
        "category": "Security",
        "order": 5,
        "is_active": True,
        "tags": ["security", "privacy", "GDPR", "compliance"],
    },
]

# Collection name -> default records, in the shape the API accepts.
DEFAULT_CONTENT = {
    "services": DEFAULT_SERVICES,
    "contact_info": DEFAULT_CONTACT_INFO,
    "global_offices": DEFAULT_GLOBAL_OFFICES,
    "faqs": DEFAULT_FAQS,
}
