# =============================================================================
# main.py  —  Entry Point for the Wedding Planner Agent
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/wedding_agent.py)
#   2. Sets up an in-memory session
#   3. Reads the couple's messages from the terminal
#   4. Streams the agent's turn, printing each tool it calls
#   5. Prints the agent's final reply
#
# A typical conversation runs the tools in order: snapshot, venue
# strategy, budget architecture, design direction, planner pitch.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Provider keys must be in the environment before LiteLlm initializes.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.wedding_agent import create_agent

APP_NAME = "wedding_planner"
USER_ID = "demo_couple"


async def run_agent():
    """Run the wedding planner agent interactively."""

    print("=" * 70)
    print("  WEDDING PLANNER AGENT")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Tell the planner about your wedding: where, when, how many guests,")
    print("   your budget range, top three priorities, vibe, and one must-have.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n💍 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Planner is thinking...\n")
        print("-" * 70)

        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Planner:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
