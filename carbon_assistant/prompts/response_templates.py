"""
Canned response text for every intent.

All user-facing copy lives here as data. Assistant-specific values are
injected from configuration, not hardcoded.
"""

from carbon_assistant.config import settings

_name = settings.assistant.name

GREETINGS = [
    "Hello! 👋 I'm your AI-powered carbon accounting assistant. I use advanced machine "
    "learning to help you understand and reduce your carbon footprint.",
    "Hi there! 🌱 Welcome to our AI-driven carbon calculator. I'm here to help you with "
    "intelligent insights about your environmental impact.",
    "Greetings! 🤖 I'm equipped with natural language processing and machine learning "
    "algorithms to assist you with carbon accounting questions.",
    "Hello! ✨ I'm your smart carbon footprint advisor, powered by AI. How can I help you "
    "achieve your sustainability goals today?",
]

GREETING_SUGGESTIONS = [
    "Calculate my carbon footprint",
    "How does AI improve carbon calculations?",
    "Get carbon reduction recommendations",
    "Explain machine learning in sustainability",
]

GOODBYES = [
    "Thank you for using our AI-powered carbon calculator! 🌍 Keep making sustainable "
    "choices!",
    "Goodbye! 👋 Remember, every action towards sustainability counts. Come back anytime "
    "for more AI insights!",
    "See you later! 🌱 Our AI is always here when you need carbon accounting assistance.",
    "Farewell! ✨ Keep reducing that carbon footprint with AI-driven strategies!",
]

FALLBACKS = [
    "I'm here to help with carbon accounting questions. Could you rephrase that?",
    "I specialize in sustainability and carbon footprint topics. What would you like to "
    "know?",
    "Let me help you with carbon accounting. Try asking about calculations, "
    "recommendations, or industry standards.",
    "I can assist with carbon footprint calculations, reduction strategies, and "
    "compliance questions. What interests you?",
]

FALLBACK_SUGGESTIONS = [
    "Calculate carbon footprint",
    "Get reduction recommendations",
    "Learn about standards",
    "Industry best practices",
]

CALCULATION_SUGGESTIONS = [
    "Try our Carbon Calculator above",
    "Tell me your energy consumption",
    "What's your company size?",
    "Need help with data collection?",
]

CALCULATION_PROMPT = (
    "I'd be happy to help calculate your carbon footprint! You can use our interactive "
    "calculator above, or tell me about your company's energy usage, fuel consumption, "
    "number of employees, business travel, and waste generation."
)

RECOMMENDATION_SUGGESTIONS = [
    "How much can I save?",
    "Implementation timeline?",
    "Industry best practices",
    "Government incentives?",
]

# Shown in the personalized recommendation variant, keyed by calculation field
SOURCE_TIPS = {
    "energy": "💡 Consider energy-efficient equipment and LED lighting upgrades.",
    "fuel": "⛽ Optimize vehicle routes and encourage fuel-efficient driving practices.",
    "employees": "🚌 Encourage public transport and carpooling initiatives.",
    "travel": "🚆 Choose rail over air travel when possible for shorter distances.",
    "waste": "🗑️ Reduce single-use materials and optimize packaging.",
}

PERSONALIZED_INTRO = (
    "📈 Based on the footprint calculation we just discussed, here is where to focus first."
)

COMPLIANCE_SUGGESTIONS = [
    "Implementation steps?",
    "Required documentation?",
    "Certification process?",
    "Deadlines and timelines?",
]

COST_SUGGESTIONS = [
    "ROI calculations?",
    "Financing options?",
    "Government incentives?",
    "Payback period?",
]

BASIC_CONCEPT_DEFAULT = (
    "Carbon accounting involves measuring, monitoring, and managing greenhouse gas "
    "emissions from business activities. Our AI system helps automate these calculations "
    "with high precision."
)

BASIC_CONCEPT_SUGGESTIONS = [
    "Calculate my carbon footprint",
    "What are Scope 1 emissions?",
    "Explain emission factors",
    "How does AI help with carbon accounting?",
]

CALCULATOR_USAGE_GUIDES = {
    "energy": "Enter your monthly energy consumption in kWh. You can find this on your "
    "electricity bills. Our AI will apply appropriate emission factors based on your "
    "location's energy grid mix.",
    "travel": "Input business travel data including distance, mode of transport, and "
    "frequency. Our ML algorithms consider factors like fuel efficiency and occupancy rates "
    "for accurate calculations.",
    "waste": "Add waste generation data by type (general, recycling, food waste). The AI "
    "considers local waste processing methods and disposal emissions.",
    "fuel": "Select your fuel type from our comprehensive database. Our system "
    "automatically applies the most current emission factors and efficiency ratings.",
    "employees": "Specify the percentage of remote work. This helps our AI calculate "
    "reduced office energy consumption and commuting emissions.",
}

CALCULATOR_USAGE_TIP = (
    "💡 **Pro Tip**: Our AI validates your inputs and suggests improvements for more "
    "accurate calculations."
)

CALCULATOR_USAGE_SUGGESTIONS = [
    "How to add travel data?",
    "What fuel types are supported?",
    "How to include waste data?",
    "Start carbon calculation",
]

INDUSTRY_BENCHMARKS = {
    "technology": "Tech companies average 15-25 tonnes CO2e per employee annually. Top "
    "performers achieve under 10 tonnes through renewable energy and efficient operations.",
    "manufacturing": "Manufacturing sector averages 50-150 tonnes CO2e per $M revenue. "
    "Leading companies use lean processes and circular economy principles.",
    "retail": "Retail companies typically emit 20-40 tonnes CO2e per $M revenue. Best "
    "practices include sustainable packaging and supply chain optimization.",
    "finance": "Financial services average 5-15 tonnes CO2e per employee. Leaders focus on "
    "green investments and digital transformation.",
    "healthcare": "Healthcare organizations average 30-50 tonnes CO2e per bed. Efficiency "
    "measures include energy management and sustainable procurement.",
}

BENCHMARK_INTRO = (
    "📊 **Industry Benchmarks**: Our AI analyzes your performance against industry peers "
    "using machine learning models trained on thousands of companies."
)

BENCHMARK_SUGGESTIONS = [
    "Compare my company performance",
    "Get industry-specific recommendations",
    "View detailed benchmarks",
    "Calculate my footprint",
]

ADVANCED_ANALYTICS_TEXT = "\n\n".join([
    "🔮 **Advanced AI Analytics**: Our machine learning models provide:",
    "📈 **Predictive Forecasting**: ML algorithms predict your future emissions based on "
    "growth patterns, seasonal trends, and industry data",
    "💰 **Cost-Benefit Analysis**: AI calculates ROI for reduction initiatives, factoring in "
    "energy prices, carbon costs, and operational savings",
    "🎯 **Smart Targets**: Algorithms recommend achievable reduction targets based on your "
    "industry, size, and current performance",
    "⚡ **Real-time Insights**: AI continuously analyzes your data to identify optimization "
    "opportunities and track progress",
])

ADVANCED_ANALYTICS_SUGGESTIONS = [
    "Predict next year's emissions",
    "Calculate carbon neutrality timeline",
    "Analyze reduction potential",
    "Get cost savings estimates",
]

AI_ML_FEATURES_TEXT = "\n\n".join([
    "🤖 **AI/ML Features**: Our platform uses cutting-edge artificial intelligence:",
    "🧠 **Neural Networks**: Deep learning models trained on global emission datasets for "
    "accurate factor calculations",
    "🔍 **Pattern Recognition**: AI identifies hidden patterns in your data to suggest "
    "optimization opportunities",
    "📊 **Confidence Scoring**: Machine learning algorithms assess data quality and provide "
    "confidence levels for each calculation",
    "🎯 **Smart Recommendations**: AI generates personalized action plans based on your "
    "specific situation and industry best practices",
    "📈 **Continuous Learning**: The system improves accuracy as it processes more data and "
    "user feedback",
])

AI_ML_FEATURES_SUGGESTIONS = [
    "How does the AI calculate confidence?",
    "What ML models are used?",
    "Get AI recommendations",
    "Learn about neural networks",
]

REPORTING_TEXT = "\n\n".join([
    "📋 **Reporting & Tracking**: Our AI-powered reporting system provides:",
    "📊 **Automated Reports**: AI generates compliance-ready reports for GHG Protocol, CDP, "
    "and other standards",
    "📈 **Trend Analysis**: Machine learning tracks your progress over time and identifies "
    "improvement opportunities",
    "🎯 **Science-Based Targets**: AI helps set and monitor targets aligned with climate "
    "science",
    "🔄 **Real-time Monitoring**: Continuous tracking with alerts when emissions exceed "
    "thresholds",
    "📱 **Dashboard Analytics**: Interactive visualizations powered by our analytics engine",
])

REPORTING_SUGGESTIONS = [
    "Generate emissions report",
    "Set science-based targets",
    "Track monthly progress",
    "View analytics dashboard",
]

INDUSTRY_ADVICE = {
    "technology": "🖥️ **Tech Industry**: Focus on green software practices, renewable energy "
    "for data centers, and sustainable hardware lifecycle management.",
    "manufacturing": "🏭 **Manufacturing**: Implement lean processes, energy-efficient "
    "equipment, and circular economy principles for waste reduction.",
    "retail": "🛍️ **Retail**: Optimize packaging, implement sustainable supply chains, and "
    "focus on last-mile delivery efficiency.",
    "finance": "💼 **Finance**: Develop green investment portfolios, digitalize operations, "
    "and measure financed emissions.",
    "healthcare": "🏥 **Healthcare**: Focus on energy management, sustainable procurement, "
    "and waste reduction in medical facilities.",
}

INDUSTRY_INTRO = (
    "🏢 **Industry-Specific Solutions**: Our AI provides tailored recommendations for your "
    "sector:"
)

INDUSTRY_SUGGESTIONS = [
    "Get tech industry tips",
    "Manufacturing best practices",
    "Retail sustainability guide",
    "Healthcare carbon reduction",
]

GENERAL_INFO_TEXT = "\n\n".join([
    f"🌱 **About {_name}**: We're pioneering AI-powered carbon accounting solutions.",
    "🚀 **Our Mission**: Making carbon accounting accessible and accurate through artificial "
    "intelligence",
    "🤖 **Technology**: Advanced machine learning models trained on global emissions data",
    "🎯 **Services**: Carbon calculation, benchmarking, reduction planning, and compliance "
    "reporting",
    "📞 **Contact**: Ready to transform your sustainability strategy with AI? Request a demo "
    "to see our platform in action!",
])

GENERAL_INFO_SUGGESTIONS = [
    "Request a demo",
    "Learn about our AI technology",
    "Calculate carbon footprint",
    "Get started with sustainability",
]
