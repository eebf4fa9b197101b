# Fixed replies for the TalentScout Hiring Assistant

GREETING = (
    "Hello! Welcome to TalentScout's intelligent hiring assistant. I'm here to help "
    "with your initial screening process. Let's start by getting to know you better. "
    "What's your full name?"
)

ASK_EMAIL = "Nice to meet you, {name}! Could you please provide your email address?"
ASK_PHONE = "Great! What's your phone number?"
ASK_EXPERIENCE = "How many years of professional experience do you have?"
ASK_POSITION = "What position(s) are you interested in applying for?"
ASK_LOCATION = "What's your current location?"
ASK_TECH_STACK = (
    "Now, let's talk about your technical skills. Please list your tech stack "
    "(programming languages, frameworks, databases, tools) separated by commas. "
    "For example: JavaScript, React, Node.js, MongoDB"
)

CONFIRM_TECH_STACK = (
    "Excellent! Based on your tech stack ({tech_stack}), I'll ask you a few technical "
    "questions to assess your proficiency. Let's start with the first one:"
)
NEXT_QUESTION = "Thank you for your answer! Here's the next question:"

SCREENING_COMPLETE = (
    "Excellent! That completes our initial screening. Thank you for taking the time "
    "to answer all the questions. Your responses have been recorded and our HR team "
    "will review your profile. You should expect to hear back from us within 2-3 "
    "business days. Is there anything else you'd like to know about the position or "
    "our company?"
)

TERMINATION_MESSAGE = (
    "Thank you for your time! Your information has been recorded. Our HR team will "
    "review your profile and get back to you within 2-3 business days. Have a great day!"
)

COMPLETED_REPLY = (
    "Thank you for your interest! If you have any other questions in the future, "
    "feel free to reach out. Good luck with your application!"
)

TERMINATION_KEYWORDS = ("bye", "goodbye", "quit", "exit", "end", "finish", "stop")

# UI labels
SUMMARY_TITLE = "Summary of your details"
SENTIMENT_LABEL = "Your mood estimate"
FIELD_LABELS = {
    "full_name": "Full Name",
    "email": "Email",
    "phone": "Phone",
    "experience_years": "Experience",
    "desired_position": "Desired Position",
    "location": "Location",
    "tech_stack": "Tech Stack",
}
