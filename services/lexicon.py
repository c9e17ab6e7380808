"""
Static keyword tables used by the ATS scorer.

Everything here is read-only module data; tuples and frozen dataclasses keep
it that way.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class IndustryCategory(str, Enum):
    # Declaration order is the tie-break order for industry detection
    SOFTWARE = "software"
    MARKETING = "marketing"
    FINANCE = "finance"
    CONSULTING = "consulting"
    DATA = "data"
    RESEARCH = "research"
    ENGINEERING = "engineering"
    BUSINESS = "business"


DEFAULT_INDUSTRY = IndustryCategory.SOFTWARE

INDUSTRY_KEYWORDS: Dict[IndustryCategory, Tuple[str, ...]] = {
    IndustryCategory.SOFTWARE: (
        'JavaScript', 'Python', 'Java', 'React', 'Node.js', 'SQL', 'Git', 'AWS', 'Docker', 'Kubernetes',
        'TypeScript', 'Angular', 'Vue.js', 'MongoDB', 'PostgreSQL', 'Redis', 'GraphQL', 'REST API',
        'Microservices', 'DevOps', 'CI/CD', 'Agile', 'Scrum', 'TDD', 'Machine Learning', 'AI',
        'Data Structures', 'Algorithms', 'System Design', 'Cloud Computing', 'Cybersecurity',
    ),
    IndustryCategory.MARKETING: (
        'Digital Marketing', 'SEO', 'SEM', 'Google Analytics', 'Social Media', 'Content Marketing',
        'Email Marketing', 'PPC', 'Facebook Ads', 'Google Ads', 'Marketing Automation', 'CRM',
        'Lead Generation', 'Conversion Optimization', 'A/B Testing', 'Brand Management', 'ROI',
        'KPI', 'Campaign Management', 'Influencer Marketing', 'Growth Hacking', 'Marketing Strategy',
    ),
    IndustryCategory.FINANCE: (
        'Financial Analysis', 'Excel', 'Financial Modeling', 'Valuation', 'Investment Banking',
        'Portfolio Management', 'Risk Management', 'Derivatives', 'Fixed Income', 'Equity Research',
        'M&A', 'Due Diligence', 'Financial Planning', 'Budgeting', 'Forecasting', 'GAAP', 'IFRS',
        'Bloomberg', 'Capital Markets', 'Private Equity', 'Venture Capital', 'Hedge Funds',
    ),
    IndustryCategory.CONSULTING: (
        'Strategy Consulting', 'Management Consulting', 'Business Analysis', 'Process Improvement',
        'Change Management', 'Project Management', 'Stakeholder Management', 'Problem Solving',
        'Data Analysis', 'Market Research', 'Competitive Analysis', 'Business Development',
        'Client Management', 'Presentation Skills', 'McKinsey', 'BCG', 'Bain', 'Deloitte', 'PwC',
    ),
    IndustryCategory.DATA: (
        'Data Science', 'Machine Learning', 'Python', 'R', 'SQL', 'Tableau', 'Power BI', 'Pandas',
        'NumPy', 'Scikit-learn', 'TensorFlow', 'PyTorch', 'Statistics', 'Data Visualization',
        'Big Data', 'Hadoop', 'Spark', 'ETL', 'Data Mining', 'Predictive Analytics', 'Deep Learning',
        'Natural Language Processing', 'Computer Vision', 'A/B Testing', 'Statistical Analysis',
    ),
    IndustryCategory.RESEARCH: (
        'Research Methodology', 'Data Collection', 'Statistical Analysis', 'Literature Review',
        'Hypothesis Testing', 'Experimental Design', 'Qualitative Research', 'Quantitative Research',
        'Peer Review', 'Publication', 'Citation Analysis', 'Research Ethics', 'Grant Writing',
        'Collaborative Research', 'Interdisciplinary Research', 'Field Studies', 'Laboratory Research',
    ),
    IndustryCategory.ENGINEERING: (
        'Engineering Design', 'CAD', 'SolidWorks', 'AutoCAD', 'MATLAB', 'Simulation', 'Prototyping',
        'Quality Control', 'Six Sigma', 'Lean Manufacturing', 'Process Optimization', 'Thermal Analysis',
        'Structural Analysis', 'Fluid Dynamics', 'Control Systems', 'Robotics', 'Automation',
    ),
    IndustryCategory.BUSINESS: (
        'Strategic Planning', 'Business Strategy', 'Market Analysis', 'Competitive Intelligence',
        'Business Development', 'Strategic Partnerships', 'Corporate Strategy', 'Growth Strategy',
        'Business Model Innovation', 'Strategic Consulting', 'Portfolio Strategy', 'Mergers & Acquisitions',
    ),
}

# Common ATS-friendly action verbs
ACTION_VERBS: Tuple[str, ...] = (
    'Achieved', 'Implemented', 'Developed', 'Led', 'Managed', 'Created', 'Designed', 'Optimized',
    'Improved', 'Increased', 'Reduced', 'Streamlined', 'Collaborated', 'Coordinated', 'Executed',
    'Delivered', 'Built', 'Established', 'Launched', 'Spearheaded', 'Transformed', 'Enhanced',
    'Analyzed', 'Researched', 'Evaluated', 'Resolved', 'Negotiated', 'Facilitated', 'Mentored',
)


class InstitutionType(str, Enum):
    IIT = "IIT"
    NIT = "NIT"
    IIM = "IIM"
    IISC = "IISc"


@dataclass(frozen=True)
class InstitutionProfile:
    names: Tuple[str, ...]        # canonical full names and common variations
    keywords: Tuple[str, ...]     # short aliases, matched as whole words
    bonus: int
    categories: Tuple[IndustryCategory, ...]


INSTITUTION_PROFILES: Dict[InstitutionType, InstitutionProfile] = {
    InstitutionType.IIT: InstitutionProfile(
        names=(
            'IIT Bombay', 'IIT Delhi', 'IIT Madras', 'IIT Kanpur', 'IIT Kharagpur',
            'IIT Roorkee', 'IIT Guwahati', 'IIT Hyderabad', 'IIT Indore', 'IIT Mandi',
            'IIT Ropar', 'IIT Bhubaneswar', 'IIT Gandhinagar', 'IIT Jodhpur', 'IIT Patna',
            'IIT Varanasi', 'IIT BHU', 'IIT Dhanbad', 'IIT Bhilai', 'IIT Goa', 'IIT Jammu',
            'IIT Dharwad', 'IIT Palakkad', 'IIT Tirupati',
            'Indian Institute of Technology',
            'IIT-B', 'IIT-D', 'IIT-M', 'IIT-K', 'IIT-KGP',
        ),
        keywords=('iit', 'indian institute of technology'),
        bonus=5,
        categories=(IndustryCategory.SOFTWARE, IndustryCategory.ENGINEERING,
                    IndustryCategory.RESEARCH, IndustryCategory.DATA),
    ),
    InstitutionType.NIT: InstitutionProfile(
        names=(
            'NIT Trichy', 'NIT Warangal', 'NIT Surathkal', 'NIT Calicut', 'NIT Durgapur',
            'NIT Rourkela', 'NIT Kurukshetra', 'NIT Jaipur', 'NIT Nagpur', 'NIT Allahabad',
            'NIT Bhopal', 'NIT Jalandhar', 'NIT Patna', 'NIT Raipur', 'NIT Hamirpur',
            'NIT Srinagar', 'NIT Silchar', 'NIT Jamshedpur', 'NIT Agartala', 'NIT Arunachal Pradesh',
            'NIT Delhi', 'NIT Goa', 'NIT Manipur', 'NIT Meghalaya', 'NIT Mizoram',
            'NIT Nagaland', 'NIT Puducherry', 'NIT Sikkim', 'NIT Uttarakhand', 'NIT Andhra Pradesh',
            'National Institute of Technology',
            'NITK', 'NITT', 'NITW', 'NITC',
        ),
        keywords=('nit', 'national institute of technology'),
        bonus=3,
        categories=(IndustryCategory.SOFTWARE, IndustryCategory.ENGINEERING,
                    IndustryCategory.DATA),
    ),
    InstitutionType.IIM: InstitutionProfile(
        names=(
            'IIM Ahmedabad', 'IIM Bangalore', 'IIM Calcutta', 'IIM Lucknow', 'IIM Kozhikode',
            'IIM Indore', 'IIM Shillong', 'IIM Rohtak', 'IIM Ranchi', 'IIM Raipur',
            'IIM Trichy', 'IIM Udaipur', 'IIM Kashipur', 'IIM Amritsar', 'IIM Bodh Gaya',
            'IIM Nagpur', 'IIM Visakhapatnam', 'IIM Sirmaur', 'IIM Jammu', 'IIM Sambalpur',
            'Indian Institute of Management',
            'IIM-A', 'IIM-B', 'IIM-C', 'IIM-L', 'IIM-K', 'IIM-I',
        ),
        keywords=('iim', 'indian institute of management'),
        bonus=4,
        categories=(IndustryCategory.BUSINESS, IndustryCategory.CONSULTING,
                    IndustryCategory.FINANCE, IndustryCategory.MARKETING),
    ),
    InstitutionType.IISC: InstitutionProfile(
        names=(
            'Indian Institute of Science',
            'IISc Bangalore',
            'IISc',
            'Indian Institute of Science, Bangalore',
        ),
        keywords=('iisc', 'indian institute of science'),
        bonus=6,
        categories=(IndustryCategory.RESEARCH, IndustryCategory.DATA,
                    IndustryCategory.ENGINEERING, IndustryCategory.SOFTWARE),
    ),
}

INSTITUTION_CONFIDENCE_FLOOR = 0.6


@dataclass(frozen=True)
class IndustryBenchmark:
    average: int
    top25: int
    top10: int


# Reference figures, not derived from collected data
INDUSTRY_BENCHMARKS: Dict[IndustryCategory, IndustryBenchmark] = {
    IndustryCategory.SOFTWARE: IndustryBenchmark(average=78, top25=88, top10=94),
    IndustryCategory.BUSINESS: IndustryBenchmark(average=75, top25=85, top10=91),
    IndustryCategory.RESEARCH: IndustryBenchmark(average=82, top25=90, top10=96),
    IndustryCategory.ENGINEERING: IndustryBenchmark(average=80, top25=88, top10=93),
}

PLACEHOLDER_PHONE = '+1 (555) 123-4567'
PLACEHOLDER_LOCATION = 'City, State'
SUMMARY_CLOSING = ('Proven track record of delivering high-quality results and driving '
                   'business growth through innovative solutions and strategic thinking.')
MAX_SKILLS_AFTER_FIX = 8
