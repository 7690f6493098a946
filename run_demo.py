import argparse
import time

from slide2048.environments.game_env import Game2048Env
from slide2048.game.traversal import DIRECTIONS

parser = argparse.ArgumentParser(description="Plays 2048 with random actions.")
parser.add_argument("--seed", type=int, default=None)
parser.add_argument("--delay", type=float, default=0.5) # seconds between steps
args = parser.parse_args()

env = Game2048Env(render_mode="human")

print("Environment created.")
print(f"Action space: {env.action_space}")

print("\n--- STARTING RANDOM AGENT DEMO ---\n")
observation, info = env.reset(seed=args.seed)
env.action_space.seed(args.seed)
terminated = False
truncated = False

total_reward = 0
step_count = 0

while not (terminated or truncated):

    # Picks random action
    action = env.action_space.sample()

    print(f"\n--- Step {step_count} ---")
    print(f"Action taken: {DIRECTIONS[action].value}")

    observation, reward, terminated, truncated, info = env.step(action)

    print(f"Reward received: {reward}")
    total_reward += reward
    step_count += 1

    time.sleep(args.delay)


print("\n--- EPISODE/GAME FINISHED ---")
print("Won!" if info["won"] else "Lost.")
print(f"Total steps: {step_count}")
print(f"Total reward: {total_reward}")
print(f"Final score: {info['score']}")
